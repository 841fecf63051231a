# util/types.py
from typing import TypedDict


# Flow: Shape of the JSON object the refinement prompt asks the model for.
class RawJudgment(TypedDict, total=False):
    found: bool
    status: str
    context: str
