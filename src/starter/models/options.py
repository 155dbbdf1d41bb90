"""Install command options."""

from pydantic import BaseModel, Field


class InstallOptions(BaseModel):
    """Flags accepted by `starter install`."""

    skip_packages: bool = Field(default=False, description="Skip Composer/NPM installs")
    skip_pest: bool = Field(default=False, description="Skip migrating to Pest")
    skip_docs: bool = Field(default=False, description="Skip VitePress documentation setup")
    no_interaction: bool = Field(
        default=False, description="Answer every prompt with its default"
    )
