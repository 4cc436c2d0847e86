from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from containerview.api.routers import containers, devices, info
from containerview.config.settings import config

app = FastAPI(
    title="Container View API",
    description="Containers and container groups registered in the device inventory.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(devices.router)
app.include_router(containers.router)
app.include_router(info.router)
