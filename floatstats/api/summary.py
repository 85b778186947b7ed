import logging
from typing import Any, Mapping, Union

from floatstats.services.numeric import numeric_summary
from floatstats.api.schemas import SampleIn, NumericSummary

logger = logging.getLogger(__name__)


def summarize(body: Union[SampleIn, Mapping[str, Any]]) -> NumericSummary:
    """
    Validate a sample and return every statistic for it.
    Raises pydantic.ValidationError (a ValueError) for malformed input.
    """
    if not isinstance(body, SampleIn):
        body = SampleIn.model_validate(body)
    logger.debug("summarizing sample of %d values", len(body.numbers))
    return NumericSummary(count=len(body.numbers), **numeric_summary(body.numbers))
