from fastapi import FastAPI, UploadFile, File, HTTPException
from pydantic import ValidationError

from .config import get_settings
from .logging_config import get_logger, setup_logging
from .models import ApiGallery, ComicInfoResponse, Hentai, HealthResponse
from .normalize import InvariantViolation, map_gallery, parse_gallery

settings = get_settings()
setup_logging(settings.log_level, settings.debug)
logger = get_logger(__name__)

app = FastAPI(
    title="comicinfo-mapper",
    description="Deterministic nhentai gallery to ComicInfo metadata mapping",
    version="0.1.0",
)


def _map(hentai: Hentai) -> dict:
    try:
        result = map_gallery(hentai)
    except InvariantViolation:
        logger.exception("Mapping gallery %d aborted", hentai.id)
        raise HTTPException(status_code=500, detail="Upload date of the gallery is out of range")

    logger.info("Mapped gallery %d: %s", hentai.id, result["comicinfo"]["Title"])
    for warning in result["report"]["warnings"]:
        logger.debug("Gallery %d: %s %s -> %s", hentai.id, warning["issue"], warning["value"], warning["action"])
    return result


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/comicinfo", response_model=ComicInfoResponse)
def comicinfo(gallery: ApiGallery):
    return _map(gallery.to_hentai())

@app.post("/comicinfo/file", response_model=ComicInfoResponse)
async def comicinfo_file(file: UploadFile = File(...)):
    if not (file.filename or "").lower().endswith(".json"):
        raise HTTPException(status_code=422, detail="Only JSON files are supported")

    raw = await file.read()
    if len(raw) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail=f"Payload exceeds {settings.max_upload_bytes} bytes")

    try:
        hentai = parse_gallery(raw)
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.errors(include_url=False, include_context=False, include_input=False),
        )
    return _map(hentai)
