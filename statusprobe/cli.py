from datetime import timedelta

import click

from statusprobe.data.probe import MetricKind, ProbeConfig
from statusprobe.orchestrator import run_metrics
from statusprobe.telemetry import (
    PsutilTelemetry,
    TelemetryProvider,
    UnsupportedPlatformError,
)
from statusprobe.util import log, system

context_settings = dict(help_option_names=["-h", "--help"])


def get_provider(ctx: click.Context) -> TelemetryProvider:
    if isinstance(ctx.obj, dict) and ctx.obj.get("provider") is not None:
        return ctx.obj["provider"]
    return PsutilTelemetry()


# The metric flags share one destination, so every occurrence is appended
# to `metrics` in command line order.
@click.command(
    help="Print network, CPU and memory usage as a single status bar line",
    context_settings=context_settings,
)
@click.option(
    "--net",
    "metrics",
    flag_value=MetricKind.NETWORK.value,
    multiple=True,
    help="Show network throughput",
)
@click.option(
    "--cpu",
    "metrics",
    flag_value=MetricKind.CPU.value,
    multiple=True,
    help="Show CPU utilization",
)
@click.option(
    "--mem",
    "metrics",
    flag_value=MetricKind.MEMORY.value,
    multiple=True,
    help="Show memory and swap usage",
)
@click.option(
    "--with-icons", default=False, is_flag=True, help="Use glyphs instead of text labels"
)
@click.option(
    "--no-fix-length",
    default=False,
    is_flag=True,
    help="Do not fit values into fixed width columns",
)
@click.option(
    "--interval",
    type=click.IntRange(min=0),
    default=1,
    show_default=True,
    help="The sampling window (in seconds)",
)
@click.option("-d", "--debug", default=False, is_flag=True, help="Enable debug logging")
@click.pass_context
def main(
    ctx: click.Context,
    metrics: tuple[str, ...],
    with_icons: bool,
    no_fix_length: bool,
    interval: int,
    debug: bool,
):
    logger = log.configure(
        debug=debug,
        name="statusprobe",
        logfile=system.get_cache_directory() / "statusprobe.log",
    )

    try:
        provider = get_provider(ctx)
    except UnsupportedPlatformError as e:
        logger.error(str(e))
        click.echo(str(e), err=True)
        ctx.exit(1)

    kinds = [MetricKind(metric) for metric in metrics or ()]
    config = ProbeConfig(
        show_icons=with_icons,
        sample_interval=timedelta(seconds=interval),
        fixed_width=not no_fix_length,
    )
    logger.debug(f"metrics={[kind.value for kind in kinds]} config={config}")

    if not kinds:
        logger.info("no metrics requested")
        return

    try:
        line = run_metrics(kinds=kinds, config=config, provider=provider)
    except Exception as e:
        logger.exception(f"rendering failed: {e}")
        click.echo(f"error: {e}", err=True)
        ctx.exit(1)

    click.echo(line)


if __name__ == "__main__":
    main()
