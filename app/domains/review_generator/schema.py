from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


# -------------------------
# Inputs
# -------------------------
# 필수 여부는 service에서 검증 (에러 메시지를 고정하기 위해 여기서는 모두 Optional)
class ReviewFormData(BaseModel):
    serviceType: Optional[str] = None
    staffName: Optional[str] = None
    specific: Optional[str] = None
    improvement: Optional[str] = None


class GenerateReviewRequest(BaseModel):
    apiKey: Optional[str] = None
    formData: Optional[ReviewFormData] = None


# -------------------------
# Outputs
# -------------------------
class GenerateReviewResponse(BaseModel):
    review: str


class ErrorResponse(BaseModel):
    error: str
