from __future__ import annotations

from app.domains.review_generator.schema import ReviewFormData

# 작성 조건 (고정)
_REVIEW_GUIDELINES = (
    "Sound natural and conversational",
    "Include specific details but avoid overly promotional language",
    "Be suitable for platforms like Google Reviews or Yelp",
    "Be between 100-150 words",
    "Maintain a positive but genuine tone",
    "Include relevant keywords for SEO naturally",
)


def build_review_prompt(form: ReviewFormData) -> str:
    """폼 필드로 리뷰 생성 지시문을 만든다. 입력 검증은 호출 측 책임."""
    lines = [
        f"Generate a natural, detailed review for a {form.serviceType} service.",
        "Include these details naturally in the review:",
        f"- Staff member name: {form.staffName}",
        f"- Specific positive aspects: {form.specific}",
        f"- Standout features: {form.improvement}",
        "",
        "The review should:",
    ]
    lines.extend(f"- {g}" for g in _REVIEW_GUIDELINES)
    return "\n".join(lines)
