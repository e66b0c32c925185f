"""
Console formatting for report bundles.
"""

from calorie_insights.core.config import ReportSettings
from calorie_insights.core.models import ConsumptionRecord, ReportBundle

NOT_FOUND = "(none found)"


def _number(value: float) -> str:
    # 800.0 -> "800", 12.5 -> "12.5"
    return str(int(value)) if float(value).is_integer() else str(value)


def _describe(record: ConsumptionRecord) -> str:
    return f"{record.name} (Protein={_number(record.protein)}, Date={record.consumed_on.isoformat()})"


def format_bundle(bundle: ReportBundle, report_settings: ReportSettings | None = None) -> list[str]:
    """
    Render every report as console lines.

    Headings name the parameters each report was computed with.

    Args:
        bundle: Computed reports
        report_settings: Parameters used for the bundle (defaults when None)

    Returns:
        Lines ready to print, one blank line between reports
    """
    params = report_settings or ReportSettings()
    lines = [f"Records decoded: {bundle.record_count}", ""]

    lines.append("Total calories per user per day:")
    for row in bundle.daily_totals:
        lines.append(f"- User {row.user_id} on {row.day.isoformat()}: {_number(row.total_calories)}")
    lines.append("")

    lines.append(f"Users with the most days under {_number(params.calorie_threshold)} calories:")
    for row in bundle.days_under_threshold:
        lines.append(f"- User {row.user_id}: {row.days_under} days")
    lines.append("")

    lines.append("Favorite items by user:")
    for row in bundle.favorite_items:
        lines.append(f"- User {row.user_id}: {row.name}")
    lines.append("")

    lines.append(f"Highest protein meal on {params.protein_date.isoformat()}:")
    lines.append(bundle.highest_protein.name if bundle.highest_protein else NOT_FOUND)
    lines.append("")

    lines.append(f"Calories > {_number(params.monthly_min_calories)} grouped by month (count, total):")
    for row in bundle.monthly_summary:
        lines.append(f"{row.month}: Count={row.count}, TotalCalories={_number(row.total_calories)}")
    lines.append("")

    lines.append(f"Top {params.top_n} protein meals overall:")
    for record in bundle.top_protein:
        lines.append(f"- {_describe(record)}")

    return lines
