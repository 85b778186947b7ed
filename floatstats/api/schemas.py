from typing import List, Optional
from pydantic import BaseModel

# Input schema for summarize(); an empty sample is allowed
class SampleIn(BaseModel):
    numbers: List[float]  # Sample to analyze

    model_config = {"extra": "forbid"}  # Forbid extra fields in input

# Output schema for summarize(); None marks an undefined statistic
class NumericSummary(BaseModel):
    count: int                # Number of values in the sample
    mean: Optional[float]     # Arithmetic mean
    stddev: Optional[float]   # Squared deviation sum over (n - 1)
    median: Optional[float]   # Lower central value
    l2: Optional[float]       # Euclidean norm
