"""
Output helpers.

Serialization of aggregate results and the end-of-batch summary table.
"""

import logging
import sys
from typing import Callable, List, Optional, TextIO

import pandas as pd

from tweetsent.models.sentiment import AggregateResult

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    "tweet",
    "name",
    "type",
    "salience",
    "entity_magnitude",
    "entity_score",
    "document_magnitude",
    "document_score",
    "aggregate",
]


def stream_sink(stream: Optional[TextIO] = None, indent: int = 4) -> Callable[[AggregateResult], None]:
    """
    Build a sink that writes each result as pretty-printed JSON.

    Args:
        stream: Target stream (defaults to sys.stdout at call time)
        indent: JSON indentation
    """
    def emit(result: AggregateResult) -> None:
        target = stream if stream is not None else sys.stdout
        target.write(result.to_json(indent=indent) + "\n")
        target.flush()

    return emit


def summarize(results: List[AggregateResult]) -> pd.DataFrame:
    """
    Build a one-row-per-tweet table of the batch results.
    """
    rows = [
        {
            "tweet": r.tweet,
            "name": r.name,
            "type": r.type,
            "salience": r.salience,
            "entity_magnitude": r.entity_sentiment.magnitude,
            "entity_score": r.entity_sentiment.score,
            "document_magnitude": r.document_sentiment.magnitude,
            "document_score": r.document_sentiment.score,
            "aggregate": r.aggregate,
        }
        for r in results
    ]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def format_summary(df: pd.DataFrame) -> str:
    """
    Render aggregate statistics and the extreme tweets of a summary table.
    """
    if df.empty:
        return "No results to summarize"

    stats = df["aggregate"].agg(["count", "mean", "min", "max"])
    most_positive = df.loc[df["aggregate"].idxmax()]
    most_negative = df.loc[df["aggregate"].idxmin()]

    lines = [
        f"Tweets analyzed: {int(stats['count'])}",
        f"Aggregate mean: {stats['mean']:.4f}",
        f"Aggregate min: {stats['min']:.4f}",
        f"Aggregate max: {stats['max']:.4f}",
        f"Most positive ({most_positive['aggregate']:.4f}): {most_positive['tweet']}",
        f"Most negative ({most_negative['aggregate']:.4f}): {most_negative['tweet']}",
        "",
        "Top entity types:",
        df["type"].value_counts().to_string(),
    ]
    return "\n".join(lines)


# Design Rationale and Trade-offs:
#
# 1. Sink as a closure over the stream
#    - Tests pass a StringIO; the CLI resolves sys.stdout at call time
#
# 2. pandas for the summary table
#    - count/mean/min/max and value_counts come from one DataFrame
#    - Trade-off: pandas is a heavy import for a short report
#
# 3. Summary on stderr
#    - stdout carries only JSON records, so it can be piped to other tools
