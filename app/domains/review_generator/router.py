from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from app.domains.review_generator.schema import ErrorResponse, GenerateReviewResponse
from app.domains.review_generator.service import ReviewGeneratorService

router = APIRouter(tags=["review-generator"])

_service = ReviewGeneratorService()


def get_review_service() -> ReviewGeneratorService:
    return _service


@router.post(
    "/api/generate-review",
    response_model=GenerateReviewResponse,
    responses={
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def generate_review(
    request: Request,
    service: ReviewGeneratorService = Depends(get_review_service),
) -> GenerateReviewResponse:
    # body 형식 에러도 {"error": ...} 형태로 내려주기 위해 직접 파싱
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="invalid body")
    return await service.generate(body)
