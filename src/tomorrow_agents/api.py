import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Any, Callable

import requests
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel, Field, ValidationError

from tomorrow_agents.agents.registry import AgentRegistry
from tomorrow_agents.config.logging_setup import configure_logging
from tomorrow_agents.config.settings import get_settings
from tomorrow_agents.errors import InvalidArgumentError
from tomorrow_agents.heuristics.intent import TravelIntent, extract_intent
from tomorrow_agents.heuristics.speech import to_speech_text
from tomorrow_agents.orchestrator.runner import AgentResult, AgentRunner
from tomorrow_agents.telemetry.dashboard import TELEMETRY_CONFIG, rate
from tomorrow_agents.telemetry.setup import configure_telemetry
from tomorrow_agents.tools.context import ToolContext, build_tool_context
from tomorrow_agents.tools.registry import ToolRegistry
from tomorrow_agents.workflows.insights_engine import (
    ActivityAnalytics,
    InsightCard,
    InsightsEngine,
    ProfileSnapshot,
)
from tomorrow_agents.workflows.onboarding_wizard import (
    OnboardingLink,
    OnboardingResult,
    OnboardingUser,
    OnboardingWizard,
)
from tomorrow_agents.workflows.theme_recommendation import (
    ThemeRecommendationWorkflow,
    ThemeWorkflowResult,
)

logger = logging.getLogger(__name__)
settings = get_settings()

DEFAULT_AGENT = "tomorrow_travel_agent"


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    configure_telemetry(settings)
    yield


app = FastAPI(title="Tomorrow Agents API", docs_url=None, redoc_url=None, lifespan=lifespan)
router = APIRouter(prefix="/api")


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    return JSONResponse(
        status_code=422, content={"detail": exc.message, "field": exc.field}
    )


@app.get("/", include_in_schema=False)
async def root_redirect():
    return RedirectResponse(url="/api/docs")


@router.get("/docs", include_in_schema=False)
async def custom_swagger_ui_html():
    return get_swagger_ui_html(
        openapi_url=app.openapi_url,
        title=app.title + " - Swagger UI",
        oauth2_redirect_url=app.swagger_ui_oauth2_redirect_url,
        swagger_js_url="https://cdn.jsdelivr.net/npm/swagger-ui-dist@5/swagger-ui-bundle.js",
        swagger_css_url="https://cdn.jsdelivr.net/npm/swagger-ui-dist@5/swagger-ui.css",
        swagger_ui_parameters={"theme": "dark"},
    )


# Dependencies are cached so each process builds its runners and workflows once.
@lru_cache
def _runner_for(agent_name: str) -> AgentRunner:
    return AgentRunner.for_agent(agent_name, settings=settings)


def get_runner_factory() -> Callable[[str], AgentRunner]:
    return _runner_for


@lru_cache
def get_tool_context() -> ToolContext:
    return build_tool_context(settings)


@lru_cache
def get_theme_workflow() -> ThemeRecommendationWorkflow:
    return ThemeRecommendationWorkflow()


@lru_cache
def get_insights_engine() -> InsightsEngine:
    return InsightsEngine()


@lru_cache
def get_onboarding_wizard() -> OnboardingWizard:
    return OnboardingWizard()


class InvokeRequest(BaseModel):
    prompt: str
    agent_id: str = DEFAULT_AGENT
    user_id: str | None = None
    evaluate: bool = False


class ToolInvokeRequest(BaseModel):
    input: dict[str, Any] = Field(default_factory=dict)


class ThemeRequest(BaseModel):
    bio: str
    links: list[str] = Field(default_factory=list)


class InsightsRequest(BaseModel):
    user_id: str
    analytics: ActivityAnalytics
    profile: ProfileSnapshot


class OnboardingRequest(BaseModel):
    user: OnboardingUser
    links: list[OnboardingLink] = Field(default_factory=list)
    current_theme: str | None = None


class SpeechRequest(BaseModel):
    text: str


class IntentRequest(BaseModel):
    transcript: str


@router.get("/health")
def health_check():
    return {"status": "ok"}


@router.get("/agents")
def list_agents():
    return AgentRegistry.descriptions()


@router.get("/tools")
def list_tools():
    return {"tools": ToolRegistry.list_all_tools(), "groups": ToolRegistry.list_groups()}


@router.post("/invoke", response_model=AgentResult)
def invoke_agent(
    request: InvokeRequest,
    runner_for: Callable[[str], AgentRunner] = Depends(get_runner_factory),
):
    try:
        runner = runner_for(request.agent_id)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    try:
        if request.evaluate:
            return runner.generate_with_evaluations(request.prompt, request.user_id)
        return runner.generate(request.prompt, request.user_id)
    except InvalidArgumentError:
        raise
    except Exception as e:
        logger.exception("Agent %s failed", request.agent_id)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/tools/{tool_name}")
def invoke_tool(
    tool_name: str,
    request: ToolInvokeRequest,
    context: ToolContext = Depends(get_tool_context),
):
    try:
        tool = ToolRegistry.get_tool(tool_name, context=context)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    try:
        return tool.invoke(request.input)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.post("/themes/recommend", response_model=ThemeWorkflowResult)
def recommend_theme(
    request: ThemeRequest,
    workflow: ThemeRecommendationWorkflow = Depends(get_theme_workflow),
):
    return workflow.invoke(request.bio, request.links)


@router.post("/insights", response_model=list[InsightCard])
def generate_insights(
    request: InsightsRequest, engine: InsightsEngine = Depends(get_insights_engine)
):
    try:
        return engine.invoke(request.user_id, request.analytics, request.profile)
    except Exception as e:
        logger.exception("Insights failed for %s", request.user_id)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/onboarding", response_model=OnboardingResult)
def run_onboarding(
    request: OnboardingRequest,
    wizard: OnboardingWizard = Depends(get_onboarding_wizard),
):
    try:
        return wizard.invoke(request.user, request.links, request.current_theme)
    except Exception as e:
        logger.exception("Onboarding failed for %s", request.user.id)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/speech/format")
def format_speech(request: SpeechRequest):
    return {"speech_text": to_speech_text(request.text)}


@router.post("/speech/intent", response_model=TravelIntent)
def travel_intent(request: IntentRequest):
    return extract_intent(request.transcript)


@router.get("/telemetry/kpis/{kpi}")
def rate_kpi(kpi: str, value: float):
    """Rate one measurement against the dashboard thresholds."""
    try:
        rating = rate(kpi, value)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return {"kpi": kpi, "value": value, "rating": rating}


@router.get("/telemetry/alerts")
def list_alerts():
    return {
        name: {"threshold": rule.threshold, "duration": rule.duration, "severity": rule.severity}
        for name, rule in TELEMETRY_CONFIG.alerts.items()
    }


@router.get("/get-models")
def get_models():
    """Fetches available models from the configured provider."""
    if settings.llm_provider == "gemini":
        if not settings.google_api_key:
            raise HTTPException(status_code=400, detail="GOOGLE_API_KEY is not set")
        url = f"https://generativelanguage.googleapis.com/v1beta/models?key={settings.google_api_key}"
        response = requests.get(url, timeout=settings.default_api_timeout_seconds)
    elif settings.llm_provider == "openai":
        if not settings.openai_api_key:
            raise HTTPException(status_code=400, detail="OPENAI_API_KEY is not set")
        headers = {"Authorization": f"Bearer {settings.openai_api_key}"}
        response = requests.get(
            "https://api.openai.com/v1/models",
            headers=headers,
            timeout=settings.default_api_timeout_seconds,
        )
    else:
        raise HTTPException(
            status_code=400, detail=f"Unsupported provider: {settings.llm_provider}"
        )

    return response.json()


app.include_router(router)
