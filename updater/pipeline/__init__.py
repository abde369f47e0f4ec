"""Update pipeline package."""

from updater.pipeline.models import UpdateResult, UpdateState
from updater.pipeline.runner import UpdatePipeline, run_update

__all__ = ["UpdatePipeline", "UpdateResult", "UpdateState", "run_update"]
