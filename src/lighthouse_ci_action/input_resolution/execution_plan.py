"""Input resolution entities."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class RawInputs:  # pylint: disable=too-many-instance-attributes
    """Unvalidated action inputs and GitHub context values."""

    server_base_url: str | None = None
    token: str | None = None
    config_path: str | None = None
    urls: str | None = None
    temporary_public_storage: str | None = None
    budget_path: str | None = None
    slack_webhook_url: str | None = None
    log_level: str | None = None
    runs: str | None = None
    application_github_token: str | None = None
    personal_github_token: str | None = None
    netlify_site: str | None = None
    ref: str | None = None


@dataclass(frozen=True)
class RcFileSettings:
    """Subset of the lighthouserc file consulted by the action."""

    has_collect: bool
    has_assert: bool
    static_dist_dir: str | None


@dataclass(frozen=True)
class ExecutionPlan:  # pylint: disable=too-many-instance-attributes
    """Validated options handed to the Lighthouse CI invocation."""

    urls: tuple[str, ...]
    static_dist_dir: str | None
    can_upload: bool
    budget_path: str | None
    slack_webhook_url: str | None
    log_level: str
    number_of_runs: int | None
    application_github_token: str | None
    personal_github_token: str | None
    server_base_url: str | None
    token: str | None
    rc_collect: bool
    rc_assert: bool
    config_path: str | None
    warnings: tuple[str, ...] = ()

    @property
    def prefers_static_dist_dir(self) -> bool:
        """Return True when the static dist dir overrides the url list."""
        return self.static_dist_dir is not None

    @property
    def effective_urls(self) -> tuple[str, ...]:
        """Urls the audit should fetch; empty when a static dist dir is served."""
        return () if self.prefers_static_dist_dir else self.urls

    def to_dict(self) -> dict[str, object]:
        payload = asdict(self)
        payload["urls"] = list(self.urls)
        payload["warnings"] = list(self.warnings)
        return payload


@dataclass(frozen=True)
class FatalInputError:
    """Terminal resolution result; the caller must stop the job."""

    message: str


InputResolution = ExecutionPlan | FatalInputError
