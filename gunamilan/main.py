from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from gunamilan.api.v1.router import api_router
from gunamilan.config import settings
from gunamilan.logging_config import configure_logging

configure_logging()

app = FastAPI(title="Guna Milan", debug=settings.DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_PREFIX)


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--host", type=str, default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    print(f"Server starting on http://{args.host}:{args.port}{settings.API_PREFIX}")

    uvicorn.run("gunamilan.main:app", host=args.host, port=args.port, reload=settings.DEBUG)
