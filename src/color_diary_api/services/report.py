"""Report generation service for PDF exports."""

import io
from datetime import date, datetime

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import (
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from color_diary_api.core.logging import ActionType, activity_logger
from color_diary_api.engine.frequency import frequency_report
from color_diary_api.engine.mixture import mix
from color_diary_api.engine.palette import classify
from color_diary_api.engine.periods import week_bounds
from color_diary_api.engine.trend import analyze_trend
from color_diary_api.services.entry_store import EntryStore

HEADER_STYLE = [
    ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
    ("ALIGN", (0, 0), (-1, -1), "CENTER"),
    ("FONTSIZE", (0, 0), (-1, -1), 10),
    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
    ("TOPPADDING", (0, 0), (-1, -1), 6),
    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
]


class ReportService:
    """Service for generating PDF reports."""

    def __init__(self, store: EntryStore) -> None:
        self.store = store

    async def generate_weekly_report(self, as_of: date) -> bytes:
        """Render the Monday-based week containing ``as_of`` as a PDF."""
        week_start, week_end = week_bounds(as_of)
        entries = sorted(
            await self.store.get_entries_in_range(week_start, week_end),
            key=lambda entry: entry.date,
        )

        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title="Color Diary Weekly Report",
        )

        story = []
        styles = getSampleStyleSheet()

        title_style = ParagraphStyle(
            "CustomTitle",
            parent=styles["Heading1"],
            fontSize=24,
            spaceAfter=30,
            alignment=1,  # Center
        )
        heading_style = ParagraphStyle(
            "CustomHeading",
            parent=styles["Heading2"],
            fontSize=16,
            spaceBefore=20,
            spaceAfter=10,
        )
        body_style = ParagraphStyle(
            "CustomBody",
            parent=styles["Normal"],
            fontSize=11,
            spaceAfter=6,
        )

        story.append(Paragraph("Color Diary Weekly Report", title_style))
        story.append(Paragraph(
            f"{week_start.strftime('%Y.%m.%d')} - {week_end.strftime('%Y.%m.%d')}",
            body_style,
        ))
        story.append(Spacer(1, 20))

        # Daily colors
        story.append(Paragraph("Daily Colors", heading_style))
        if entries:
            rows = [["Date", "Color", "Mood", "Score"]]
            row_styles = []
            for index, entry in enumerate(entries, start=1):
                palette_entry = classify(entry.color_hex)
                rows.append([
                    entry.date.strftime("%a %d.%m"),
                    entry.color_hex.hex,
                    palette_entry.mood,
                    str(entry.mood_score),
                ])
                row_styles.append(
                    ("BACKGROUND", (1, index), (1, index), colors.HexColor(entry.color_hex.hex))
                )

            table = Table(rows, colWidths=[90, 80, 100, 50])
            table.setStyle(TableStyle(
                [("BACKGROUND", (0, 0), (-1, 0), colors.darkslategray)] + HEADER_STYLE + row_styles
            ))
            story.append(table)
            story.append(Paragraph(f"Total entries this week: {len(entries)}", body_style))
        else:
            story.append(Paragraph("No colors were recorded this week.", body_style))
        story.append(Spacer(1, 10))

        # Mixture
        story.append(Paragraph("Weekly Mixture", heading_style))
        mixture = mix(entries, as_of)
        if mixture:
            story.append(Table(
                [[""]],
                colWidths=[60],
                rowHeights=[30],
                style=TableStyle([("BACKGROUND", (0, 0), (0, 0), colors.HexColor(mixture.mixed_color.hex))]),
            ))
            story.append(Spacer(1, 6))
            story.append(Paragraph(
                f"Mixed color: {mixture.mixed_color.hex} | Average intensity: {mixture.average_intensity}/10"
                f" | Dominant warmth: {mixture.dominant_warmth}",
                body_style,
            ))
            story.append(Paragraph(mixture.interpretation, body_style))
            for recommendation in mixture.recommendations:
                story.append(Paragraph(f"- {recommendation}", body_style))
        else:
            story.append(Paragraph("Not enough data for a mixture.", body_style))

        # Trend and frequency
        trend = analyze_trend(entries)
        if trend:
            story.append(Paragraph("Mood Trend", heading_style))
            stats_data = [
                ["Metric", "Value"],
                ["Direction", str(trend.trend_direction).title()],
                ["Average", f"{trend.average_score:.1f}/10"],
                ["Range", f"{trend.score_range.min} - {trend.score_range.max}"],
                ["Consistency", f"{trend.consistency * 100:.0f}%"],
            ]
            stats_table = Table(stats_data, colWidths=[120, 80])
            stats_table.setStyle(TableStyle(
                [("BACKGROUND", (0, 0), (-1, 0), colors.darkblue)] + HEADER_STYLE
            ))
            story.append(stats_table)

            report = frequency_report(entries)
            story.append(Paragraph("Most Selected Colors", heading_style))
            for item in report.top_colors:
                story.append(Paragraph(f"{item.key.title()}: {item.count}", body_style))

        # Footer
        story.append(Spacer(1, 30))
        footer_style = ParagraphStyle(
            "Footer",
            parent=styles["Normal"],
            fontSize=9,
            textColor=colors.grey,
            alignment=1,
        )
        story.append(Paragraph(
            f"Generated by Color Diary on {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
            footer_style,
        ))

        doc.build(story)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        activity_logger.log(
            action_type=ActionType.REPORT_DOWNLOAD,
            action_data={
                "week_start": week_start.isoformat(),
                "entry_count": len(entries),
                "pdf_size": len(pdf_bytes),
            },
        )

        return pdf_bytes
