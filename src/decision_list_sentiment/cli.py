"""Command-line interface for the decision-list sentiment classifier.

Provides ``train``, ``test``, and ``eval`` commands with rich terminal
output using the ``click`` and ``rich`` libraries. Each command is also
installed as a standalone script.

Usage::

    decision-list train train.txt decision-list.txt
    decision-list test decision-list.txt test.txt system.txt
    decision-list eval gold.txt system.txt eval.txt

A wrong number of arguments prints the usage message and exits normally.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .classifier import DecisionListClassifier
from .config import DEFAULT_CONFIG
from .corpus import (
    read_decision_list,
    read_labels,
    read_test_reviews,
    read_training_reviews,
    write_decision_list,
    write_labels,
    write_lines,
)
from .errors import DecisionListError
from .evaluation import EvaluationResult, evaluate, format_metric
from .log import configure_logging
from .trainer import DecisionListTrainer

console = Console()


class UsageCommand(click.Command):
    """Command that answers usage mistakes with its usage line and exit status 0."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            console.print(f"[yellow]Incorrect arguments:[/] {escape(e.format_message())}")
            click.echo(ctx.get_usage())
            ctx.exit(0)


def _verbose_option(func):
    return click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")(func)


def _fail(e: Exception) -> None:
    console.print(f"[bold red]Error:[/] {escape(str(e))}")
    sys.exit(1)


@click.group()
@click.version_option(package_name="decision-list-sentiment")
def main() -> None:
    """Decision-list sentiment classifier.

    Train a ranked list of unigram and bigram features, classify reviews
    with it, and evaluate the results against a gold standard.
    """
    pass


@main.command("train", cls=UsageCommand)
@click.argument("training_file", type=click.Path(path_type=Path))
@click.argument("out_file", type=click.Path(path_type=Path))
@click.option("--mode", "-m", type=click.Choice(["f", "p", "h"]), default="p",
              show_default=True,
              help="Feature counting: f=frequency, p=presence, h=hybrid.")
@_verbose_option
def train_command(training_file: Path, out_file: Path, mode: str, verbose: bool) -> None:
    """Learn a decision list from TRAINING_FILE and write it to OUT_FILE.

    Example: decision-list train train.txt decision-list.txt
    """
    configure_logging(verbose)
    trainer = DecisionListTrainer(mode=mode, config=DEFAULT_CONFIG)

    with console.status("[bold blue]Training decision list...", spinner="dots"):
        try:
            reviews = read_training_reviews(training_file)
            decision_list = trainer.train(reviews)
            written = write_decision_list(out_file, decision_list, DEFAULT_CONFIG)
        except DecisionListError as e:
            _fail(e)

    console.print(
        f"Trained on [bold]{len(reviews)}[/] reviews: {len(decision_list)} features, "
        f"[bold]{written}[/] decisions at or above "
        f"{DEFAULT_CONFIG.emission_threshold} written to {out_file}"
    )


@main.command("test", cls=UsageCommand)
@click.argument("decision_list_file", type=click.Path(path_type=Path))
@click.argument("test_file", type=click.Path(path_type=Path))
@click.argument("out_file", type=click.Path(path_type=Path))
@_verbose_option
def test_command(decision_list_file: Path, test_file: Path, out_file: Path, verbose: bool) -> None:
    """Classify every review in TEST_FILE and write the labels to OUT_FILE.

    Example: decision-list test decision-list.txt test.txt system.txt
    """
    configure_logging(verbose)

    with console.status("[bold blue]Classifying reviews...", spinner="dots"):
        try:
            decision_list = read_decision_list(decision_list_file)
            reviews = read_test_reviews(test_file)
            classifier = DecisionListClassifier(decision_list, config=DEFAULT_CONFIG)
            labels = classifier.classify_reviews(reviews)
            write_labels(out_file, labels)
        except DecisionListError as e:
            _fail(e)

    positives = sum(labels.values())
    console.print(
        f"Classified [bold]{len(labels)}[/] reviews "
        f"({positives} positive, {len(labels) - positives} negative) "
        f"with {len(decision_list)} decisions; labels written to {out_file}"
    )


@main.command("eval", cls=UsageCommand)
@click.argument("gold_file", type=click.Path(path_type=Path))
@click.argument("system_file", type=click.Path(path_type=Path))
@click.argument("out_file", type=click.Path(path_type=Path))
@_verbose_option
def eval_command(gold_file: Path, system_file: Path, out_file: Path, verbose: bool) -> None:
    """Compare SYSTEM_FILE labels with GOLD_FILE and write the report to OUT_FILE.

    Example: decision-list eval gold.txt system.txt eval.txt
    """
    configure_logging(verbose)

    try:
        gold = read_labels(gold_file)
        system = read_labels(system_file)
        result = evaluate(gold, system, gold_path=gold_file, system_path=system_file)
        write_lines(out_file, result.to_lines())
    except DecisionListError as e:
        _fail(e)

    _render_metrics(result, out_file)


# ------------------------------------------------------------------
# Rich rendering helpers
# ------------------------------------------------------------------

def _render_metrics(result: EvaluationResult, out_file: Path) -> None:
    """Render confusion counts and metrics as rich tables."""
    console.print()

    matrix = Table(title="Confusion Matrix", show_lines=True)
    matrix.add_column("", style="cyan")
    matrix.add_column("Gold 1", justify="right")
    matrix.add_column("Gold 0", justify="right")
    matrix.add_row("System 1", str(result.true_positives), str(result.false_positives))
    matrix.add_row("System 0", str(result.false_negatives), str(result.true_negatives))
    console.print(matrix)

    table = Table(title=f"Evaluation: {result.total} documents")
    table.add_column("Metric", style="cyan", width=12)
    table.add_column("Value", justify="right", width=10)
    table.add_row("Accuracy", format_metric(result.accuracy))
    table.add_row("Precision", format_metric(result.precision))
    table.add_row("Recall", format_metric(result.recall))
    table.add_row("F1", format_metric(result.f1))
    console.print(table)

    console.print(f"\n[dim]Report saved to {out_file}[/]")


if __name__ == "__main__":
    main()
