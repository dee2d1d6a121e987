"""CPU anomaly analysis prompt."""

from __future__ import annotations

from prom_analyzer.models import MetricQueryResult

CPU_ANALYSIS_TEMPLATE = """This is a CPU metric from Prometheus. \
Please analyze the data, check for any anomalies, and provide a summary.

Data:
{data}"""


def serialize_result(result: MetricQueryResult) -> str:
    """Pretty-print a query result as JSON in wire key order.

    resultType comes before result, and each series lists metric before values.
    """
    return result.model_dump_json(by_alias=True, indent=2)


def build_prompt(result: MetricQueryResult) -> str:
    """Build the analysis request for a CPU range query result.

    Args:
        result: The data portion of a Prometheus range query.

    Returns:
        The instructional preamble followed by the serialized result.
    """
    return CPU_ANALYSIS_TEMPLATE.format(data=serialize_result(result))
