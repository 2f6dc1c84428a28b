"""Configuration for sitefavicon"""

from pathlib import Path

from dynaconf import Dynaconf, Validator

# Validators for sitefavicon settings.
_validators = [
    Validator("logging.format", is_in=["mozlog", "pretty"]),
    Validator("logging.level", is_in=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    Validator("logging.can_propagate", is_type_of=bool),
    Validator("metrics.dev_logger", is_type_of=bool),
    Validator("metrics.host", is_type_of=str),
    Validator("metrics.port", gte=0, is_type_of=int),
    # Every network call in a run shares this deadline, so keep it bounded.
    Validator("favicon.fetch_timeout_ms", is_type_of=int, gt=0, lte=60_000, must_exist=True),
    Validator("favicon.sizes", is_type_of=list, must_exist=True),
    Validator("favicon.namespace", is_type_of=str, must_exist=True),
    Validator("favicon.user_agent", is_type_of=str, must_exist=True),
    Validator("asset_store.driver", is_in=["local", "gcs"], must_exist=True),
    Validator(
        "asset_store.local.root_path",
        "asset_store.local.public_base_url",
        is_type_of=str,
        must_exist=True,
        when=Validator("asset_store.driver", eq="local"),
    ),
    Validator(
        "asset_store.gcs.gcp_project",
        "asset_store.gcs.bucket_name",
        is_type_of=str,
        must_exist=True,
        when=Validator("asset_store.driver", eq="gcs"),
    ),
    Validator("asset_store.gcs.cdn_hostname", is_type_of=str),
]

# `root_path` = The directory holding the TOML files below, DO NOT CHANGE.
# `envvar_prefix` = Export envvars with `export SITEFAVICON_FOO=bar`.
# `settings_files` = Load these files in the order.
# `merge_enabled` = Nested tables of an environment extend the defaults instead of replacing them.
# `environments` = Enable layered environments such as `development`, `production`, `testing` etc.
# `env_switcher` = Switch environments by `export SITEFAVICON_ENV=production`.
#                  Default: `development`.
# `validators` = Define validators for sitefavicon settings.

settings = Dynaconf(
    root_path=str(Path(__file__).resolve().parent),
    envvar_prefix="SITEFAVICON",
    settings_files=[
        "default.toml",
        "development.toml",
        "production.toml",
        "testing.toml",
    ],
    environments=True,
    merge_enabled=True,
    env_switcher="SITEFAVICON_ENV",
    validators=_validators,
)
