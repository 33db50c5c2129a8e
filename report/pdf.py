# report/pdf.py

import logging
from io import BytesIO

from fastapi import APIRouter, Form, HTTPException
from fastapi.responses import StreamingResponse
from fastapi.templating import Jinja2Templates

from calculator import NutritionCalculator
from config import REPORT_FILENAME_PREFIX, TEMPLATES_DIR
from constants import ACTIVITY_LEVELS, GOALS
from forms import InvalidProfile, profile_from_form
from models import PlanResult
from views import build_food_guide

router = APIRouter()
templates = Jinja2Templates(directory=TEMPLATES_DIR)
calculator = NutritionCalculator()

logger = logging.getLogger("nutrition_calculator.report")


def render_report_html(plan: PlanResult) -> str:
    template = templates.get_template("pdf_report.html")
    return template.render(
        plan=plan,
        goal_label=GOALS.get(plan.profile.goal, plan.profile.goal),
        activity_label=ACTIVITY_LEVELS.get(plan.profile.activity, ""),
        food_guide=build_food_guide(plan.portions),
    )


def render_pdf(html_content: str) -> BytesIO:
    """Render HTML to a PDF held in memory."""
    # WeasyPrint loads Pango on import
    from weasyprint import HTML

    pdf_io = BytesIO()
    HTML(string=html_content).write_pdf(pdf_io)
    pdf_io.seek(0)
    return pdf_io


@router.post("/report")
async def report_pdf(
    sex: str = Form(...),
    age: str = Form(...),
    weight: str = Form(...),
    height: str = Form(...),
    activity: str = Form(...),
    goal: str = Form(...),
):
    """
    Download the plan for the submitted profile as a PDF.
    """
    try:
        profile = profile_from_form(sex, age, weight, height, activity, goal)
    except InvalidProfile as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    plan = calculator.calculate_plan(profile)

    try:
        pdf_io = render_pdf(render_report_html(plan))
    except Exception:
        logger.exception("Failed to render PDF report for goal=%s", profile.goal)
        raise

    filename = f"{REPORT_FILENAME_PREFIX}_{profile.goal}.pdf"

    return StreamingResponse(
        pdf_io,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
