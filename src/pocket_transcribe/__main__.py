from pocket_transcribe.l4_frameworks_and_drivers.cli import cli

cli()
