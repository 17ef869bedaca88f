"""
Startup Security Validation.

Checks security settings before the application accepts traffic.
Production-only invariants block startup; a weak JWT secret is reported
as a warning so the legacy shared secret keeps working in development.

Called during FastAPI lifespan initialization.
"""

from modules.backend.core.config import get_app_config, get_settings
from modules.backend.core.logging import get_logger

logger = get_logger(__name__)


class StartupSecurityError(RuntimeError):
    """Raised when a startup security check fails."""

    pass


def run_startup_checks() -> list[str]:
    """
    Validate security invariants at startup.

    Returns:
        Warnings that did not block startup

    Raises:
        StartupSecurityError: If any blocking check fails
    """
    app_config = get_app_config()
    settings = get_settings()
    environment = app_config.application.environment
    is_production = environment == "production"

    errors: list[str] = []
    warnings: list[str] = []

    _check_secret_strength(settings, app_config.security, warnings)
    _check_production_safety(app_config, is_production, errors)

    for warning in warnings:
        logger.warning("Startup security warning", extra={"check": warning})

    if errors:
        for error in errors:
            logger.error("Startup security check failed", extra={"check": error})
        raise StartupSecurityError(
            f"Startup blocked: {len(errors)} security check(s) failed:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    logger.info(
        "Startup security checks passed",
        extra={"environment": environment, "warnings": len(warnings)},
    )
    return warnings


def _check_secret_strength(settings, security_config, warnings: list[str]) -> None:
    """Flag a JWT secret shorter than the configured minimum."""
    jwt_min = security_config.secrets_validation.jwt_secret_min_length
    if len(settings.jwt_secret) < jwt_min:
        warnings.append(
            f"JWT_SECRET is {len(settings.jwt_secret)} chars, "
            f"minimum is {jwt_min}; tokens can be forged by anyone who guesses it"
        )


def _check_production_safety(app_config, is_production: bool, errors: list[str]) -> None:
    """Validate production environment safety constraints."""
    if not is_production:
        return

    app = app_config.application
    if app.debug:
        errors.append("debug is true in production environment")

    if app_config.features.api_detailed_errors:
        errors.append("api_detailed_errors is true in production environment")

    if app.docs_enabled:
        errors.append("docs_enabled is true in production environment")
