from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict


class PathsSettings(BaseModel):
    """Path configuration.

    All paths are relative to the 'site_root' unless absolute.
    site_root defaults to current working directory.
    """

    site_root: Path = Field(
        default_factory=Path.cwd,
        description="Root directory of the site (defaults to current working directory)",
    )

    posts_dir: Path = Field(default=Path("_posts"), description="Posts directory")
    layouts_dir: Path = Field(default=Path("_layouts"), description="Layouts directory")
    output_dir: Path = Field(default=Path("_site"), description="Rendered site directory")

    @property
    def abs_posts_dir(self) -> Path:
        return self._resolve(self.posts_dir)

    @property
    def abs_layouts_dir(self) -> Path:
        return self._resolve(self.layouts_dir)

    @property
    def abs_output_dir(self) -> Path:
        return self._resolve(self.output_dir)

    def _resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return self.site_root / path


class DefaultsSettings(BaseModel):
    """Front-matter values applied when a post leaves them out."""

    layout: str | None = Field(default=None, description="Layout for posts without a 'layout' key")


class FeedSettings(BaseModel):
    """Atom feed output."""

    enabled: bool = Field(default=True, description="Write an Atom feed")
    path: str = Field(default="feed.xml", description="Feed path relative to the output directory")
    author: str | None = Field(default=None, description="Feed-level author name")


class SiteConfig(BaseSettings):
    """Root configuration for a Postpress site.

    Supports environment variable overrides with the pattern:
    POSTPRESS_SECTION__KEY (e.g., POSTPRESS_PATHS__OUTPUT_DIR)
    """

    title: str = Field(default="My Blog", description="Site title")
    description: str = Field(default="", description="Site description")
    url: str = Field(default="", description="Absolute site URL, used by the feed")
    baseurl: str = Field(default="", description="Path prefix the site is served under")
    permalink: str = Field(default="/:slug/", description="Default permalink pattern for posts")
    index_layout: str = Field(default="default", description="Layout wrapping the post index")

    defaults: DefaultsSettings = Field(default_factory=DefaultsSettings)
    paths: PathsSettings = Field(default_factory=PathsSettings)
    feed: FeedSettings = Field(default_factory=FeedSettings)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="POSTPRESS_",
        env_nested_delimiter="__",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment variables override values read from _config.yml
        return env_settings, init_settings

    def absolute_url(self, path: str) -> str:
        """Join the site url, baseurl and a site-relative path."""
        return f"{self.url.rstrip('/')}{self.relative_url(path)}"

    def relative_url(self, path: str) -> str:
        """Prefix a site-relative path with the baseurl."""
        base = self.baseurl.rstrip("/")
        if base and not base.startswith("/"):
            base = "/" + base
        return f"{base}/{path.lstrip('/')}"
