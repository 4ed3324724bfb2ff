"""CLI entry point for the image translation client."""

import logging
from pathlib import Path

import click

from .config import DEFAULT_BASE_URL, TranslatorConfig
from .core import TranslationService
from .errors import AuthError, TranslatorError
from .translation import TranslationJob


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def account_options(f):
    """Options shared by every command that logs in."""
    options = [
        click.option('--username', '-u', required=True, envvar='IMAGE_TRANSLATOR_USERNAME', help='Account e-mail'),
        click.option('--password', '-p', required=True, envvar='IMAGE_TRANSLATOR_PASSWORD', help='Account password'),
        click.option('--fingerprint', required=True, envvar='IMAGE_TRANSLATOR_FINGERPRINT', help='Client device fingerprint'),
        click.option('--client-uuid', required=True, envvar='IMAGE_TRANSLATOR_CLIENT_UUID', help='Client instance identifier'),
        click.option('--base-url', default=DEFAULT_BASE_URL, help='Translation service URL'),
        click.option('--verbose', '-v', is_flag=True, help='Verbose output'),
    ]
    for option in reversed(options):
        f = option(f)
    return f


@click.group()
@click.version_option(version="0.1.0")
def cli():
    """Translate manga pages and other images with Ichigo Reader."""
    pass


@cli.command()
@click.argument('sources', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output-dir', '-o', required=True, type=click.Path(file_okay=False, path_type=Path), help='Directory translated results are written to')
@click.option('--suffix', default='.json', help='File suffix of the translated results')
@account_options
def translate(
    sources: tuple[Path, ...],
    output_dir: Path,
    suffix: str,
    username: str,
    password: str,
    fingerprint: str,
    client_uuid: str,
    base_url: str,
    verbose: bool
):
    """Translate images and write the results to OUTPUT_DIR.

    SOURCES are the image files to translate. Each result is written to
    OUTPUT_DIR/<name><suffix>.
    """
    _configure_logging(verbose)

    jobs = [
        TranslationJob(source=source, destination=output_dir / f"{source.stem}{suffix}")
        for source in sources
    ]

    # Each destination must belong to exactly one job
    seen = {}
    for job in jobs:
        if job.destination in seen:
            click.secho(
                f"Error: {seen[job.destination]} and {job.source} would both be written to {job.destination}",
                fg='red',
                err=True
            )
            raise SystemExit(1)
        seen[job.destination] = job.source

    output_dir.mkdir(parents=True, exist_ok=True)
    config = TranslatorConfig(base_url=base_url)

    try:
        service = TranslationService.ichigo(username, password, client_uuid, fingerprint, config)
    except AuthError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        raise SystemExit(1)

    def progress_callback(current: int, total: int, job: TranslationJob):
        if verbose:
            click.echo(f"  [{current}/{total}] {job.source} -> {job.destination}")

    click.echo(f"Translating {len(jobs)} image(s)...")

    try:
        service.translate(jobs, progress_callback=progress_callback)
    except TranslatorError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        raise SystemExit(1)

    click.secho(f"Translation complete: {len(jobs)} file(s) written to {output_dir}", fg='green')


@cli.command()
@account_options
def login(
    username: str,
    password: str,
    fingerprint: str,
    client_uuid: str,
    base_url: str,
    verbose: bool
):
    """Check that the account credentials are accepted."""
    _configure_logging(verbose)
    config = TranslatorConfig(base_url=base_url)

    try:
        TranslationService.ichigo(username, password, client_uuid, fingerprint, config)
    except AuthError as e:
        click.secho(f"Error: {e}", fg='red')
        raise SystemExit(1)

    click.secho("Login succeeded!", fg='green')
    click.echo(f"  Service URL: {config.base_url}")
    click.echo(f"  Account: {username}")


if __name__ == '__main__':
    cli()
