import logging
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException

from resume_sections.config import settings
from resume_sections.core.dispatcher import parse_section
from resume_sections.core.errors import ParserConfigError, UnknownSectionError
from resume_sections.core.parser_config import default_config
from resume_sections.core.schemas import ParseRequest, ParseResponse, SectionType

logger = logging.getLogger(__name__)

router = APIRouter(tags=["parse"])


@router.get(
    "/sections",
    response_model=List[SectionType],
    summary="List Sections",
    description="Section types accepted by POST /parse/{section_type}.",
)
def list_sections():
    return list(SectionType)


@router.get(
    "/sections/{section_type}/config",
    summary="Default Parser Configuration",
    description="Default configuration for one section parser. Regex fields are returned as pattern strings.",
    responses={404: {"description": "Unknown section type"}},
)
def get_section_config(section_type: str) -> Dict[str, Any]:
    try:
        config = default_config(section_type)
    except UnknownSectionError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return config.model_dump(mode="json")


@router.post(
    "/parse/{section_type}",
    response_model=ParseResponse,
    summary="Parse Resume Section",
    description="Turn pasted text from one resume section into structured records.",
    responses={
        200: {
            "description": "Successfully parsed section",
            "content": {
                "application/json": {
                    "example": {
                        "section_type": "skills",
                        "result": ["Python", "JavaScript", "React"],
                    }
                }
            },
        },
        404: {"description": "Unknown section type"},
        413: {"description": "Text longer than the configured maximum"},
        422: {"description": "Invalid parser configuration"},
    },
)
def parse_resume_section(section_type: str, request: ParseRequest):
    """
    Parse one section of pasted resume text.

    **Returns:**
    - **demographics**: a single record (name, address, phone, email, ...)
    - **education / employment / projects / references**: key -> record mapping
    - **skills**: list of distinct skills
    """
    if len(request.text) > settings.max_text_length:
        raise HTTPException(
            status_code=413,
            detail=f"Text is {len(request.text)} characters; the limit is {settings.max_text_length}.",
        )

    try:
        result = parse_section(section_type, request.text, request.config)
    except UnknownSectionError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except ParserConfigError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    logger.info(f"Parsed {section_type} section ({len(request.text)} chars)")
    return ParseResponse(section_type=section_type, result=result)
