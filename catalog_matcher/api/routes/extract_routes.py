"""Extract Routes - HTTP <-> Matching Engine Translator

요청 본문을 엔진에 넘기고, 결과를 응답 포맷으로 바꾸며, 소요 시간을 측정합니다.
"""
import time

from fastapi import APIRouter, Depends

from catalog_matcher.core.logging import logger, sanitize_for_log
from catalog_matcher.engine import ProductMatcher
from catalog_matcher.schemas.extract_schema import ExtractionRequest, ExtractionResponse

from .dependencies import get_matcher

router = APIRouter(tags=["extract"])


def format_elapsed(elapsed_s: float) -> str:
    """경과 시간(초) -> '0.1234 ms'"""
    return f"{elapsed_s * 1000.0:.4f} ms"


@router.post("/extract", response_model=ExtractionResponse)
def extract(
    request: ExtractionRequest,
    matcher: ProductMatcher = Depends(get_matcher),
):
    """원문 텍스트 -> 상품/브랜드/카테고리

    CPU 바운드 작업이므로 sync 핸들러로 두어 스레드풀에서 실행되게 합니다.
    """
    start = time.perf_counter()
    result = matcher.match(request.raw_text)
    elapsed = time.perf_counter() - start

    logger.info(
        f"[API] extract '{sanitize_for_log(request.raw_text, 60)}' -> {result.status.value} "
        f"({format_elapsed(elapsed)})"
    )

    return ExtractionResponse(
        product=result.product,
        brand=result.brand,
        category=result.category,
        status=result.status.value,
        time_taken=format_elapsed(elapsed),
    )
