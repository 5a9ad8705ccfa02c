"""Help information contributed by remote extensions."""

from pydantic import BaseModel, ConfigDict, Field


class HelpContribution(BaseModel):
    """Help links as declared by an extension."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    extension_id: str = Field(min_length=1, description="Contributing extension")
    enable_proposed_api: bool = Field(
        default=False, description="Whether the extension may use proposed API"
    )
    get_started: str | None = Field(default=None, description="Getting Started page")
    documentation: str | None = Field(default=None, description="Documentation page")
    feedback: str | None = Field(default=None, description="Feedback reporter")
    issues: str | None = Field(default=None, description="Issues list")

    @property
    def has_links(self) -> bool:
        return any((self.get_started, self.documentation, self.feedback, self.issues))


class HelpInformation(BaseModel):
    """Help links accepted for display."""

    model_config = ConfigDict(frozen=True)

    extension_id: str
    get_started: str | None = None
    documentation: str | None = None
    feedback: str | None = None
    issues: str | None = None
