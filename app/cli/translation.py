"""CLI for building translation domains."""

from pathlib import Path
from typing import List, Optional

import typer
from typing_extensions import Annotated

from infrastructure.i18n import TranslationService, create_translation_service
from infrastructure.logging import bind_build_context, configure_logging, get_module_logger

logger = get_module_logger()

app = typer.Typer(
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Translation service commands."""


def _parse_domains(domains: Optional[str], service: TranslationService) -> List[str]:
    if not domains:
        return service.guess_available_domains()
    return [domain.strip() for domain in domains.split(",") if domain.strip()]


@app.command(name="translation-build")
def build(
    locale: Annotated[
        Optional[str],
        typer.Option(
            "--locale",
            help="Locale to build, else the active locale.",
        ),
    ] = None,
    domains: Annotated[
        Optional[str],
        typer.Option(
            "--domains",
            help="Domains to build separated by comma, else all domains are built.",
        ),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Verbose mode, more v, more verbose.",
        ),
    ] = 0,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Dry run, do not apply any change.",
        ),
    ] = False,
    lang_folder: Annotated[
        Optional[Path],
        typer.Option(
            "--lang-folder",
            file_okay=False,
            help="Translation tree to read instead of the configured one.",
        ),
    ] = None,
) -> None:
    """Build the translations of a locale, bypassing the translation cache."""
    if verbose >= 2:
        configure_logging(log_level="DEBUG")

    service = create_translation_service(locale, lang_folder=lang_folder)
    domain_list = _parse_domains(domains, service)

    prefix = "[DRY-RUN] " if dry_run else ""
    typer.echo(
        f'{prefix}Build translations for locale "{service.locale}" '
        f"and domains : {', '.join(domain_list)}"
    )

    with bind_build_context(locale=service.locale, dry_run=dry_run):
        for domain in domain_list:
            if not dry_run:
                service.build_domain(domain, force=True)
            if verbose:
                typer.echo(f'Built domain "{domain}"')

    logger.info(
        "translation_build_completed",
        locale=service.locale,
        domains=domain_list,
        dry_run=dry_run,
    )
    typer.echo("Domains were built.")
