"""Entrypoint for the command line interface."""

import asyncio

import typer

from sitefavicon.config_logging import configure_logging
from sitefavicon.configs import settings
from sitefavicon.favicon.pipeline import resolve_favicon
from sitefavicon.metrics import configure_metrics, get_metrics_client
from sitefavicon.utils.storage import create_asset_store

job_settings = settings.favicon

# CLI Options
driver_option = typer.Option(
    settings.asset_store.driver,
    "--driver",
    help="Asset store driver used to persist the rendered variants ('local' or 'gcs')",
)

timeout_option = typer.Option(
    job_settings.fetch_timeout_ms,
    "--timeout-ms",
    help="Deadline in milliseconds for the homepage fetch and for every candidate fetch",
)

namespace_option = typer.Option(
    job_settings.namespace,
    "--namespace",
    help="Top-level folder of the stored variants: {namespace}/{site_id}/favicon-{size}.png",
)

cli = typer.Typer(
    name="sitefavicon",
    help="Resolve website favicons into canonical stored variants",
    no_args_is_help=True,
    add_completion=False,
)


@cli.callback()
def setup():
    """CLI Entrypoint"""
    configure_logging()


@cli.command()
def resolve(
    site_id: str = typer.Argument(..., help="Identifier the variants are stored under"),
    site_url: str = typer.Argument(..., help="Root URL of the website"),
    driver: str = driver_option,
    timeout_ms: int = timeout_option,
    namespace: str = namespace_option,
):
    """Resolve the favicon of SITE_URL and print the result as JSON."""
    store = create_asset_store(driver)

    async def _run():
        await configure_metrics()
        try:
            return await resolve_favicon(
                site_id, site_url, store, timeout_ms=timeout_ms, namespace=namespace
            )
        finally:
            await get_metrics_client().close()

    result = asyncio.run(_run())
    typer.echo(result.model_dump_json())


if __name__ == "__main__":
    cli()
