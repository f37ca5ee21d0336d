"""
API-specific request and response models for FastAPI endpoints.

Field names follow the public wire format (camelCase
envelope keys, ``nanosecond`` for the model latency).
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from blockthetweet.models.prediction import PredictionResult


class PredictRequest(BaseModel):
    """Body of POST /. Extra fields are ignored."""
    
    text: StrictStr = Field(description="Text to classify")


class PredictionResponse(BaseModel):
    """Successful classification."""
    
    text_hash: int = Field(description="XXH64 fingerprint of the text")
    text: str = Field(description="Text as received")
    confidence: float = Field(description="Model confidence")
    nanosecond: int = Field(ge=0, description="Model call latency in nanoseconds")
    
    @classmethod
    def from_result(cls, result: PredictionResult) -> "PredictionResponse":
        return cls.model_validate(result.to_response_data())


class ErrorResponse(BaseModel):
    """Error envelope. Never contains internal details."""
    model_config = ConfigDict(populate_by_name=True)
    
    status_code: int = Field(alias="statusCode")
    message: str = Field(examples=["Bad Request", "Internal Server Error"])
    error: str = Field(
        description="Failure kind",
        examples=["bad_input", "inference_error", "internal_error"],
    )


class ServiceInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    
    author: str
    version: str
    app_name: str = Field(alias="appName")


class InfoResponse(BaseModel):
    """Envelope returned by GET /."""
    model_config = ConfigDict(populate_by_name=True)
    
    status_code: int = Field(default=200, alias="statusCode")
    message: str = "success"
    data: ServiceInfo
