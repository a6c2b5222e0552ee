"""CLI entry point for pocket-transcribe."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from pocket_transcribe import __version__
from pocket_transcribe.l1_entities.engine_kind import EngineKind
from pocket_transcribe.l1_entities.errors import PocketTranscribeError

log = logging.getLogger('pt.cli')

_KIND = click.Choice([k.value for k in EngineKind])


def _fail(message: str) -> None:
    click.echo(f'Error: {message}', err=True)
    sys.exit(1)


@click.group()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML config file.',
)
@click.option(
    '-d',
    '--data-dir',
    default=None,
    type=click.Path(file_okay=False),
    help='Model storage root (defaults to the platform user data directory).',
)
@click.option('-v', '--verbose', is_flag=True, help='Also log to stderr.')
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx: click.Context, config_path, data_dir, verbose):
    """pocket-transcribe -- download offline speech models and transcribe audio files."""
    import yaml  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help

    from pocket_transcribe.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from pocket_transcribe.l4_frameworks_and_drivers.config import (  # noqa: PLC0415 -- deferred: not needed for --help
        build_app_config,
    )
    from pocket_transcribe.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: not needed for --help
        DependencyContainer,
    )
    from pocket_transcribe.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_logging,
    )

    try:
        overrides: dict = {}
        if data_dir:
            overrides['storage'] = {'data_dir': data_dir}
        raw = YamlConfigLoader().load_raw(config_path, overrides=overrides or None)
        config = build_app_config(raw)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        _fail(str(e))

    container = DependencyContainer(config)
    setup_logging(container.data_dir, verbose=verbose)
    ctx.obj = container


@cli.command('models')
@click.option('-k', '--kind', type=_KIND, default=None, help='Only list models for this engine.')
@click.pass_obj
def list_models(container, kind):
    """List catalog models and whether each one is installed."""
    kinds = [EngineKind(kind)] if kind else list(EngineKind)
    for k in kinds:
        for descriptor in container.catalog.available(k):
            state = 'installed' if container.store.exists(descriptor) else 'missing'
            click.echo(f'{k.value:<8} {descriptor.id:<10} {state:<10} {descriptor.source_url}')


@cli.command()
@click.argument('kind', type=_KIND)
@click.argument('model_id')
@click.pass_obj
def status(container, kind, model_id):
    """Exit 0 if the model is installed, 1 otherwise."""
    try:
        present = container.controller.is_model_present(kind, model_id)
    except PocketTranscribeError as e:
        _fail(str(e))
    click.echo('installed' if present else 'missing')
    if not present:
        sys.exit(1)


@cli.command()
@click.argument('kind', type=_KIND)
@click.argument('model_id')
@click.pass_obj
def download(container, kind, model_id):
    """Download (and unpack) a model unless it is already installed."""
    progress_shown = False

    def _on_progress(percent: int) -> None:
        nonlocal progress_shown
        progress_shown = True
        click.echo(f'\rDownloading {model_id}… {percent}%', nl=False, err=True)

    try:
        path = container.controller.download_model(kind, model_id, on_progress=_on_progress)
    except PocketTranscribeError as e:
        log.error('Download failed: %s', e)
        if progress_shown:
            click.echo('', err=True)
        _fail(str(e))
    if progress_shown:
        click.echo('', err=True)
    click.echo(str(path))


@cli.command()
@click.argument('kind', type=_KIND)
@click.argument('model_id')
@click.argument('audio_file', type=click.Path(dir_okay=False))
@click.option('-o', '--output', type=click.Path(dir_okay=False), default=None, help='Write the transcript here.')
@click.pass_obj
def transcribe(container, kind, model_id, audio_file, output):
    """Transcribe AUDIO_FILE with an installed model."""
    try:
        text = container.controller.transcribe(kind, model_id, audio_file)
    except PocketTranscribeError as e:
        log.error('Transcription failed: %s', e)
        _fail(str(e))
    if output:
        Path(output).write_text(text + '\n', encoding='utf-8')
    else:
        click.echo(text)
