from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import os
import logging
from dotenv import load_dotenv

from db import Base, engine
from eligibility import models  # noqa: F401  registers tables on Base.metadata
from eligibility.routes import router as eligibility_router

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logging.info("App starting")

app = FastAPI(title="Transfer Eligibility API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

Base.metadata.create_all(bind=engine)

app.include_router(eligibility_router)


@app.get("/health", tags=["meta"], summary="Health check")
def health():
    return {"status": "ok"}
