"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Details about a failed search, including the HTTP status code to report."""

    model_config = ConfigDict(frozen=True)

    status_code: int = 500
    error: str
    reason: str | None = None

    def to_body(self) -> dict[str, str]:
        """Build the JSON body sent to clients."""
        body = {"error": self.error}
        if self.reason:
            body["reason"] = self.reason
        return body
