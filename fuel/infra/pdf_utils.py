import io
import logging
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from fuel.logic.planning.meal_library import meal_type_label
from fuel.utilities.constants import DAY_NAMES

logger = logging.getLogger(__name__)

_HEADER_STYLE = [
    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#4CAF50")),
    ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("FONTSIZE", (0, 0), (-1, 0), 10),
    ("BOTTOMPADDING", (0, 0), (-1, 0), 6),
    ("VALIGN", (0, 0), (-1, -1), "TOP"),
    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
]


def _p(text, style):
    return Paragraph(escape(str(text)), style)


def generate_pdf_for_plan(plan, taper=None, groceries=None):
    """Render the week plan (and optionally the taper checklist and grocery list) as PDF bytes."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, rightMargin=30, leftMargin=30, topMargin=30, bottomMargin=30)

    styles = getSampleStyleSheet()
    body = styles["BodyText"]
    a = plan.athlete
    elements = [
        Paragraph("ELFIT Rookie Fuel Planner", styles["Title"]),
        _p(f"Athlete: {a.age} y • {a.sex} • {a.weight_kg} kg — week of {plan.start_date} ({plan.timezone})", body),
        Spacer(1, 12),
    ]

    for idx, day in enumerate(plan.days):
        day_name = DAY_NAMES[idx] if idx < len(DAY_NAMES) else ""
        elements.append(Paragraph(escape(f"{day_name} — {day.date}"), styles["Heading3"]))
        data = [["Meal", "Items", "Notes"]]
        for meal in day.meals:
            items = ", ".join(f"{item.name} ({item.grams} g)" for item in meal.items)
            data.append([meal_type_label(meal.type), _p(items, body), _p(meal.notes or "", body)])
        table = Table(data, colWidths=[80, 260, 195], repeatRows=1)
        table.setStyle(TableStyle(_HEADER_STYLE))
        elements.append(table)
        t = day.totals
        elements.append(_p(f"Totals: {t['kcal']} kcal • P {t['p']} g • F {t['f']} g • C {t['c']} g"
                           f" — water target {day.water_ml} mL", body))
        elements.append(Spacer(1, 10))

    if taper:
        elements.append(Paragraph("Competition week taper", styles["Heading2"]))
        for entry in taper:
            elements.append(_p(f"{entry['date']} ({entry['dayLabel']})", styles["Heading4"]))
            for tip in entry["guidance"]:
                elements.append(_p(f"• {tip}", body))

    if groceries:
        elements.append(Paragraph("Grocery list", styles["Heading2"]))
        data = [["Item", "Approx. grams", "Energy (kcal)"]]
        data.extend([_p(row["name"], body), str(row["grams"]), str(row["kcal"])] for row in groceries)
        table = Table(data, colWidths=[300, 110, 110], repeatRows=1)
        table.setStyle(TableStyle(_HEADER_STYLE))
        elements.append(table)

    doc.build(elements)
    pdf = buf.getvalue()
    logger.info("Rendered plan PDF for week of %s (%d bytes)", plan.start_date, len(pdf))
    return pdf
