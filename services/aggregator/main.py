"""Main SQI service: scores, aggregates and ranks a student's attempts."""

import logging
import sys
import time
import click
from typing import Iterable, Optional

from config.models import Attempt, SQIResult
from config.settings import SQIConfig, get_logging_config, get_sqi_config
from processors.attempt_scorer import AttemptScorer
from services.errors import SQIError
from services.ingestion.payload_parser import Payload, PayloadParser

from .concept_ranker import ConceptRanker
from .json_exporter import JSONExporter
from .result_assembler import Clock, ResultAssembler
from .score_aggregator import ScoreAggregator

logger = logging.getLogger(__name__)


class SQIService:
    """Orchestrates parsing, scoring, aggregation and result assembly."""

    def __init__(self, config: Optional[SQIConfig] = None, clock: Optional[Clock] = None):
        self.config = config or get_sqi_config()
        self.parser = PayloadParser()
        self.scorer = AttemptScorer(config=self.config)
        self.aggregator = ScoreAggregator(self.scorer)
        self.ranker = ConceptRanker(self.config)
        self.assembler = ResultAssembler(self.ranker, self.config, clock)

    # -------------------------------------------------------------------------
    # MAIN LOGIC
    # -------------------------------------------------------------------------

    def calculate(self, student_id: str, attempts: Iterable[Attempt]) -> SQIResult:
        """Compute the SQI result for already-validated attempts."""
        attempts = list(attempts)
        logger.info(f"Computing SQI for student {student_id} ({len(attempts)} attempts)")
        start_time = time.time()

        if not attempts:
            logger.warning(f"No attempts supplied for student {student_id}")

        aggregation = self.aggregator.aggregate(attempts)
        result = self.assembler.assemble(student_id, aggregation)

        processing_time_ms = int((time.time() - start_time) * 1000)
        logger.info(
            f"SQI for student {student_id}: overall={result.overall_sqi} "
            f"topics={len(result.topic_scores)} concepts={len(result.concept_scores)} "
            f"in {processing_time_ms} ms"
        )
        return result

    def compute(self, payload: Payload) -> SQIResult:
        """Parse a raw payload and compute its SQI result."""
        request = self.parser.parse(payload)
        return self.calculate(request.student_id, request.attempts)


def calculate_sqi(student_id: str, attempts: Iterable[Attempt], clock: Optional[Clock] = None) -> SQIResult:
    """Convenience wrapper using the configured defaults."""
    return SQIService(clock=clock).calculate(student_id, attempts)


# -------------------------------------------------------------------------
# CLI COMMANDS
# -------------------------------------------------------------------------

@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
def cli(log_level: Optional[str]):
    """SQI engine CLI."""
    logging_config = get_logging_config()
    logging.basicConfig(
        level=(log_level or logging_config.level).upper(),
        format=logging_config.format,
        stream=sys.stderr,
    )


@cli.command()
@click.argument("payload", type=click.File("rb"))
@click.option("--output", "-o", type=click.Path(), default=None,
              help="Write the result to this file (or directory) instead of stdout.")
@click.option("--indent", default=2, show_default=True, help="JSON indentation.")
def compute(payload, output: Optional[str], indent: int):
    """Compute the SQI result for a student attempt payload ('-' for stdin)."""
    service = SQIService()
    exporter = JSONExporter(indent=indent)
    try:
        result = service.compute(payload.read())
    except SQIError as e:
        click.echo(f"❌ SQI computation failed ({e.kind}): {e}", err=True)
        sys.exit(1)

    if output:
        path = exporter.write(result, output)
        click.echo(f"✅ SQI result for {result.student_id} written to {path}", err=True)
    else:
        click.echo(exporter.to_json(result))


@cli.command()
@click.argument("payload", type=click.File("rb"))
def validate(payload):
    """Validate a student attempt payload without scoring it."""
    try:
        request = PayloadParser().parse(payload.read())
    except SQIError as e:
        click.echo(f"❌ Validation failed ({e.kind}): {e}", err=True)
        sys.exit(1)

    click.echo(f"✅ Payload valid for student {request.student_id}")
    click.echo(f"Attempts: {len(request.attempts)}")


if __name__ == "__main__":
    cli()
