"""Click command group: ``kubeimg list`` and ``kubeimg compare``."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import click

from kubeimg import __version__
from kubeimg.app import CompareReport, ListReport, compare_namespaces, list_namespace, prepare_side
from kubeimg.collector.retriever import KubernetesRetriever
from kubeimg.config import load_config, validate_kinds, validate_log_level
from kubeimg.errors import KubeImgError
from kubeimg.models.config import KubeImgConfig
from kubeimg.observability.logging import bind_command, get_logger, setup_logging
from kubeimg.render.document import write_document

EXIT_DIFFERENCES = 3

_logger = get_logger("cli")

F = TypeVar("F", bound=Callable[..., Any])


def _configure(kubeconfig: str | None, kinds: str | None, log_level: str | None) -> KubeImgConfig:
    """Load KUBEIMG_* settings, apply command-line overrides, set up logging."""
    try:
        config = load_config()
        if kubeconfig:
            config.cluster.kubeconfig = kubeconfig
        if kinds:
            config.inventory.kinds = validate_kinds(kinds)
        if log_level:
            config.log.level = validate_log_level(log_level)
    except KubeImgError as exc:
        raise click.ClickException(str(exc)) from exc
    setup_logging(config.log.level)
    return config


def _retriever(config: KubeImgConfig) -> KubernetesRetriever:
    return KubernetesRetriever(
        kubeconfig=config.cluster.kubeconfig or None,
        request_timeout=config.cluster.request_timeout,
    )


def _write_html(path: Path, html: str) -> None:
    try:
        write_document(path, html)
    except OSError as exc:
        raise click.ClickException(f"cannot write HTML file {path}: {exc.strerror or exc}") from exc
    click.echo(f"\nHTML file generated: {path}\n")


_common_options = [
    click.option("--html", "html_path", type=click.Path(dir_okay=False, path_type=Path), help="Also write an HTML report."),
    click.option("--kinds", default=None, help="Comma-separated resource kinds to inspect (default: all)."),
    click.option("--kubeconfig", default=None, help="Path to the kubeconfig file."),
    click.option(
        "--log-level",
        default=None,
        type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
        help="Log verbosity (logs go to stderr).",
    ),
]


def common_options(fn: F) -> F:
    for option in reversed(_common_options):
        fn = option(fn)
    return fn


@click.group()
@click.version_option(__version__, prog_name="kubeimg")
def cli() -> None:
    """List or compare container images across Kubernetes namespaces."""


@cli.command("list")
@click.option("-c", "--context", default=None, help="Kubeconfig context (default: current-context).")
@click.option("-n", "--namespace", required=True, help="Namespace to inspect.")
@common_options
def list_cmd(
    context: str | None,
    namespace: str,
    html_path: Path | None,
    kinds: str | None,
    kubeconfig: str | None,
    log_level: str | None,
) -> None:
    """Print the images and versions of every workload in NAMESPACE."""
    config = _configure(kubeconfig, kinds, log_level)
    bind_command("list", context=context, namespace=namespace)

    async def _run() -> ListReport:
        side = prepare_side(context, namespace, config.cluster.kubeconfig or None)
        async with _retriever(config) as retriever:
            return await list_namespace(retriever, side, config.inventory.kinds)

    try:
        report = asyncio.run(_run())
    except KubeImgError as exc:
        _logger.debug("list_failed", error=str(exc))
        raise click.ClickException(str(exc)) from exc

    click.echo(report.to_text())
    if html_path is not None:
        _write_html(html_path, report.to_html())


@cli.command("compare")
@click.option("-c1", "--context1", default=None, help="Context of the first namespace (default: current-context).")
@click.option("-n1", "--namespace1", required=True, help="First namespace.")
@click.option("-c2", "--context2", default=None, help="Context of the second namespace (default: current-context).")
@click.option("-n2", "--namespace2", required=True, help="Second namespace.")
@click.option("--fail-on-diff", is_flag=True, help=f"Exit with status {EXIT_DIFFERENCES} when differences exist.")
@common_options
@click.pass_context
def compare_cmd(
    ctx: click.Context,
    context1: str | None,
    namespace1: str,
    context2: str | None,
    namespace2: str,
    fail_on_diff: bool,
    html_path: Path | None,
    kinds: str | None,
    kubeconfig: str | None,
    log_level: str | None,
) -> None:
    """Compare image versions between two namespaces, possibly in different contexts."""
    config = _configure(kubeconfig, kinds, log_level)
    bind_command("compare", context1=context1, namespace1=namespace1, context2=context2, namespace2=namespace2)

    async def _run() -> CompareReport:
        kubeconfig_path = config.cluster.kubeconfig or None
        side_a = prepare_side(context1, namespace1, kubeconfig_path)
        side_b = prepare_side(context2, namespace2, kubeconfig_path)
        async with _retriever(config) as retriever:
            return await compare_namespaces(retriever, side_a, side_b, config.inventory.kinds)

    try:
        report = asyncio.run(_run())
    except KubeImgError as exc:
        _logger.debug("compare_failed", error=str(exc))
        raise click.ClickException(str(exc)) from exc

    text = report.to_text()
    if text:
        click.echo(text)
    if html_path is not None:
        _write_html(html_path, report.to_html())

    if fail_on_diff and report.result.has_differences:
        ctx.exit(EXIT_DIFFERENCES)
