"""Command-line entry point for passagekit."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import orjson
import typer
import yaml
from dotenv import load_dotenv

from .analysis.client import AnalysisError, GeminiClient
from .analysis.runner import analyze as run_analysis
from .config import load_config
from .pipeline import PassagePipeline
from .report import build_report
from .segmentation.blocks import load_blocks
from .serialize.serializer import PassageSerializer

LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Segment extracted text blocks into scored retrieval passages")


def _echo_json(payload: Dict[str, Any]) -> None:
    typer.echo(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8"))


@app.command()
def run(
    blocks_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON or JSONL block records"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Optional configuration YAML"),
    out: Optional[Path] = typer.Option(None, "--out", help="Write passages as JSONL to this path"),
    report: bool = typer.Option(False, "--report", help="Print the full report instead of a summary"),
    analyze: bool = typer.Option(False, "--analyze", help="Request a narrative analysis from the LLM service"),
    url: Optional[str] = typer.Option(None, "--url", help="Source URL recorded in the report and prompt"),
    title: Optional[str] = typer.Option(None, "--title", help="Document title for the analysis prompt"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Python logging level"),
) -> None:
    """Run the pipeline on ``blocks_path`` and print the results."""

    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.WARNING))
    config = load_config(config_path)
    blocks = load_blocks(blocks_path, config.extraction)
    result = PassagePipeline(config).run(blocks)

    if out is not None:
        PassageSerializer().write(result.passages, out)
        LOGGER.info("Wrote %d passages to %s", result.total, out)

    analysis: Optional[str] = None
    if analyze:
        load_dotenv()
        api_key = os.getenv(config.analysis.api_key_env)
        if not api_key:
            raise typer.BadParameter(f"Set {config.analysis.api_key_env} to use --analyze", param_hint="--analyze")
        try:
            with GeminiClient(api_key=api_key, config=config.analysis) as client:
                analysis = run_analysis(result, client, url=url, title=title, config=config)
        except AnalysisError as exc:
            LOGGER.error("Analysis failed: %s", exc)
            analysis = f"Analysis Error: {exc}"

    if report or analyze:
        _echo_json(build_report(result, config, analysis=analysis, source_url=url))
        return

    stats = result.stats
    _echo_json(
        {
            "passages": result.total,
            "sections": stats.sections if stats else 0,
            "avg_words": stats.avg_words if stats else None,
            "avg_vector_quality": stats.avg_vector_quality if stats else None,
            "avg_retrieval_score": stats.avg_retrieval_score if stats else None,
            "avg_semantic_weight": stats.avg_semantic_weight if stats else None,
            "out": str(out) if out else None,
        }
    )


@app.command("show-config")
def show_config(
    config_path: Optional[Path] = typer.Option(None, "--config", help="Optional configuration YAML"),
) -> None:
    """Print the effective configuration as YAML."""

    config = load_config(config_path)
    typer.echo(yaml.safe_dump(config.to_dict(), sort_keys=False))


def main() -> None:  # pragma: no cover - CLI entrypoint
    app()


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    main()
