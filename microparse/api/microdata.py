import logging
from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool

from microparse.config import get_settings
from microparse.errors import ParseError
from microparse.parser import parse
from microparse.schemas.response import MicrodataRequest, MicrodataResponse
from microparse.services.fetcher import fetch_html

logger = logging.getLogger(__name__)

router = APIRouter()


# --------------------------------------------------
# INPUT RESOLUTION
# --------------------------------------------------

async def _resolve_input(payload: MicrodataRequest):

    if payload.url:
        html = await run_in_threadpool(fetch_html, payload.url)

        if html is None:
            raise HTTPException(502, f"Could not fetch {payload.url}")

        return html, payload.url

    if payload.html is not None:

        if not payload.base_url:
            raise HTTPException(400, "'base_url' is required with 'html'")

        limit = get_settings().max_html_size
        if len(payload.html) > limit:
            raise HTTPException(413, f"HTML size {len(payload.html)} exceeds limit of {limit}")

        return payload.html, payload.base_url

    raise HTTPException(400, "Provide 'url', or 'html' with 'base_url'")


# --------------------------------------------------
# EXTRACT ENDPOINT
# --------------------------------------------------

@router.post("/microdata", response_model=MicrodataResponse)
async def extract_microdata(payload: MicrodataRequest):

    html, base_url = await _resolve_input(payload)

    try:
        document = await run_in_threadpool(parse, html, base_url)
        microdata = document.microdata

    except ValueError as e:
        raise HTTPException(400, str(e))

    except ParseError as e:
        logger.warning(f"Parse failed for {base_url}: {e}")
        raise HTTPException(400, str(e))

    return MicrodataResponse(base_url=base_url, microdata=microdata)
