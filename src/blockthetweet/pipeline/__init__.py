"""Prediction pipeline orchestration."""

from blockthetweet.pipeline.assembler import PredictionPipeline

__all__ = ["PredictionPipeline"]
