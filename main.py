import logging
from typing import Optional

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app_logging import configure_logging
from calculator import NutritionCalculator
from config import TEMPLATES_DIR
from constants import ACTIVITY_LEVELS, GOALS
from forms import InvalidProfile, profile_from_form
from models import PlanResult
from views import bmi_display, build_food_guide

from report.pdf import router as report_router

configure_logging()
logger = logging.getLogger("nutrition_calculator.main")

app = FastAPI(title="Personal Nutrition Calculator")
templates = Jinja2Templates(directory=TEMPLATES_DIR)

app.include_router(report_router)
calculator = NutritionCalculator()

FORM_DEFAULTS = {
    "sex": "male",
    "age": 30,
    "weight": 75,
    "height": 175,
    "activity": 1.375,
    "goal": "maintain",
}


def page_context(
    values: dict,
    result: Optional[PlanResult] = None,
    error: Optional[str] = None,
) -> dict:
    """
    Template context for the calculator page. `result` is None until a
    submission succeeds; each submission replaces it whole.
    """
    context = {
        "values": values,
        "activity_levels": ACTIVITY_LEVELS,
        "goals": GOALS,
        "error": error,
        "result": result,
    }
    if result is not None:
        context["bmi_display"] = bmi_display(result.bmi)
        context["food_guide"] = build_food_guide(result.portions)
    return context


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    return templates.TemplateResponse(request, "form.html", page_context(FORM_DEFAULTS))


@app.post("/calculate", response_class=HTMLResponse)
async def calculate_view(
    request: Request,
    sex: str = Form(...),
    age: str = Form(...),
    weight: str = Form(...),
    height: str = Form(...),
    activity: str = Form(...),
    goal: str = Form(...),
):
    values = {
        "sex": sex,
        "age": age,
        "weight": weight,
        "height": height,
        "activity": activity,
        "goal": goal,
    }
    try:
        profile = profile_from_form(sex, age, weight, height, activity, goal)
    except InvalidProfile as exc:
        return templates.TemplateResponse(
            request,
            "form.html",
            page_context(values, error=str(exc)),
            status_code=400,
        )

    plan = calculator.calculate_plan(profile)

    return templates.TemplateResponse(request, "form.html", page_context(values, result=plan))
