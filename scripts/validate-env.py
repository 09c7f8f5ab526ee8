#!/usr/bin/env python3
"""
Environment Configuration Validator for NyayaSetu

Checks the .env.dev and .env.prod files for the database, model provider
and CORS settings the API needs before it can start.
"""

import sys
from pathlib import Path


DATABASE_VARS = ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_DB")
PLACEHOLDERS = {"", "CHANGE_ME", "your-api-key"}


def read_env_file(env_file_path):
    env_vars = {}
    with open(env_file_path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, value = line.split("=", 1)
                env_vars[key.strip()] = value.strip().strip('"')
    return env_vars


def validate_env_file(env_file_path):
    """Return (errors, warnings) for one environment file."""
    warnings = []
    errors = []

    if not env_file_path.exists():
        errors.append(f"Environment file not found: {env_file_path}")
        return errors, warnings

    env_vars = read_env_file(env_file_path)
    is_production = env_vars.get("ENVIRONMENT") == "production"

    if "ENVIRONMENT" not in env_vars:
        errors.append("Missing required environment variable: ENVIRONMENT")

    # Database: either a full URL or the POSTGRES_* triple
    if "DATABASE_URL" not in env_vars:
        missing = [var for var in DATABASE_VARS if var not in env_vars]
        if missing:
            errors.append(
                "Set DATABASE_URL or all of: " + ", ".join(DATABASE_VARS)
            )
        elif is_production and len(env_vars["POSTGRES_PASSWORD"]) < 12:
            errors.append("POSTGRES_PASSWORD is too weak for production use")

    # Model provider
    provider = env_vars.get("LLM_PROVIDER", "gemini")
    if provider == "azure_openai":
        for var in (
            "AZURE_OPENAI_ENDPOINT",
            "AZURE_OPENAI_API_KEY",
            "AZURE_OPENAI_API_VERSION",
        ):
            if env_vars.get(var, "") in PLACEHOLDERS:
                errors.append(f"LLM_PROVIDER=azure_openai requires {var}")
    elif env_vars.get("GEMINI_API_KEY", "") in PLACEHOLDERS:
        if is_production:
            errors.append("GEMINI_API_KEY must be set in production")
        else:
            warnings.append(
                "GEMINI_API_KEY is not set; summaries and translations will fail"
            )

    # Rate limiting degrades to disabled without Upstash
    if not env_vars.get("UPSTASH_REDIS_REST_URL") or not env_vars.get(
        "UPSTASH_REDIS_REST_TOKEN"
    ):
        message = "Upstash credentials missing; rate limiting is disabled"
        (errors if is_production else warnings).append(message)

    origins = env_vars.get("CORS_ORIGINS", "")
    if is_production and "localhost" in origins:
        warnings.append("CORS_ORIGINS contains localhost in production environment")
    if "*" in origins and env_vars.get("ALLOW_CREDENTIALS", "true").lower() == "true":
        errors.append("CORS_ORIGINS cannot contain '*' while ALLOW_CREDENTIALS=true")

    return errors, warnings


def main():
    print("Validating NyayaSetu environment configuration...\n")

    project_root = Path(__file__).parent.parent
    env_files = [
        (project_root / ".env.dev", "Development"),
        (project_root / ".env.prod", "Production"),
    ]

    total_errors = 0
    total_warnings = 0

    for env_file, env_name in env_files:
        print(f"{env_name} environment ({env_file.name})")
        print("-" * 50)

        errors, warnings = validate_env_file(env_file)
        for error in errors:
            print(f"   ERROR   {error}")
        for warning in warnings:
            print(f"   WARNING {warning}")
        if not errors and not warnings:
            print("   OK")

        total_errors += len(errors)
        total_warnings += len(warnings)
        print()

    print(f"Total errors: {total_errors}")
    print(f"Total warnings: {total_warnings}")
    return 1 if total_errors else 0


if __name__ == "__main__":
    sys.exit(main())
