import os
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.routes.tasks import router as tasks_router

# Load environment variables from .env file
load_dotenv()


def _env_list(name: str, default: str = "*") -> list[str]:
    raw = os.getenv(name, default)
    if raw.strip() == "*":
        return ["*"]
    return [item.strip() for item in raw.split(",") if item.strip()]


app = FastAPI(title="Task Management API")

# CORS for frontends, configured from environment variables
app.add_middleware(
    CORSMiddleware,
    allow_origins=_env_list("CORS_ORIGINS"),
    allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true",
    allow_methods=_env_list("CORS_ALLOW_METHODS"),
    allow_headers=_env_list("CORS_ALLOW_HEADERS"),
)

app.include_router(tasks_router)


@app.get("/", tags=["home"], summary="Home page")
def home() -> dict[str, str]:
    return {
        "name": app.title,
        "tasks": tasks_router.prefix,
        "docs": app.docs_url or "",
    }
