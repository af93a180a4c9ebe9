from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from skillmatch.api.dependencies import get_generator
from skillmatch.config import settings
from skillmatch.models.requests import (
    CoverLetterVerifyRequest,
    FactsRequest,
    MatchRequest,
    TailorRequest,
    VerifyRequest,
)
from skillmatch.models.schemas import FactSet, MatchReport, RewrittenBullet, VerificationResult
from skillmatch.services import bullet_tailor, fact_extractor, matcher, verifier

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
    }


@router.post("/match", response_model=MatchReport)
@limiter.limit("60/minute")
async def match(request: Request, body: MatchRequest):
    return matcher.match_user_to_job(body.profile, body.requirements)


@router.post("/facts", response_model=FactSet)
@limiter.limit("60/minute")
async def facts(request: Request, body: FactsRequest):
    return fact_extractor.extract_facts(body.achievement)


@router.post("/verify", response_model=VerificationResult)
@limiter.limit("60/minute")
async def verify(request: Request, body: VerifyRequest):
    return verifier.verify(body.facts, body.rewritten_text)


@router.post("/verify/cover-letter", response_model=VerificationResult)
@limiter.limit("60/minute")
async def verify_cover_letter(request: Request, body: CoverLetterVerifyRequest):
    return verifier.verify_cover_letter(body.sections, body.profile)


@router.post("/tailor", response_model=list[RewrittenBullet])
@limiter.limit("10/minute")
def tailor(request: Request, body: TailorRequest, generate=Depends(get_generator)):
    # sync handler: the generator blocks on the provider call
    keywords = bullet_tailor.select_target_keywords(body.keywords)
    return bullet_tailor.tailor_bullets(
        body.achievements,
        keywords,
        generate,
        title=body.title,
        company=body.company,
    )
