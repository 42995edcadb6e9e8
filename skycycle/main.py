"""
HTTP control panel for the day-night cycle.

Exposes the cycle settings (autoplay, time of day, cycle duration) so they
can be edited while the frame loop runs.

IMPORTANT:
- Must run with ONE worker (the frame loop lives in this process)
"""

from fastapi import FastAPI, HTTPException, APIRouter, Query
from pydantic import BaseModel, Field
from contextlib import asynccontextmanager

from skycycle.config import (
    CYCLE_DURATION_SECONDS, AUTO_PLAY, START_TIME, FRAME_RATE,
    LOG_LEVEL, RENDER_LOOP_ENABLED,
)
from skycycle.controller import CycleController
from skycycle.lighting_math import wrap_unit
from skycycle.logger import get_logger
from skycycle.render_loop import RenderLoop
from skycycle.scene import build_scene
from skycycle.state import CycleConfig, ConfigurationError


# ============================================================================
# Engine initialization
# ============================================================================

cycle_config = CycleConfig()
scene_bindings = build_scene()
controller = CycleController(cycle_config, scene_bindings)
render_loop = RenderLoop(controller, frame_rate=FRAME_RATE)

logger = get_logger("panel")


# ============================================================================
# FastAPI Lifespan (frame loop thread)
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    Starts the frame loop on startup and stops it on shutdown.
    """
    logger.info("SkyCycle starting up")
    logger.info(
        f"Configuration: CYCLE_DURATION_SECONDS={CYCLE_DURATION_SECONDS}, "
        f"AUTO_PLAY={AUTO_PLAY}, START_TIME={START_TIME}, LOG_LEVEL={LOG_LEVEL}"
    )

    if RENDER_LOOP_ENABLED:
        render_loop.start()
    else:
        logger.info("Render loop disabled, use POST /cycle/tick to step the cycle")

    # App is running
    yield

    logger.info("Starting graceful shutdown...")
    render_loop.stop()
    logger.info("Shutdown complete")


# ============================================================================
# FastAPI App
# ============================================================================

app = FastAPI(
    title="SkyCycle API",
    lifespan=lifespan,
    redoc_url=None,
    docs_url="/docs"
)

cycle_router = APIRouter(
    prefix="/cycle",
    tags=["Day-Night Cycle"]
)


# ------------------------------------------------------------------

class TimeRequest(BaseModel):
    current_time: float = Field(
        ..., allow_inf_nan=False, description="Time of day (0 = midnight, 0.5 = noon), wraps modulo 1"
    )


class AutoPlayRequest(BaseModel):
    auto_play: bool = Field(..., description="Advance time from the wall clock")


class DurationRequest(BaseModel):
    cycle_duration_seconds: float = Field(
        ..., gt=0.0, allow_inf_nan=False, description="Length of one full day in seconds"
    )


class TickRequest(BaseModel):
    wall_clock_seconds: float = Field(
        ..., ge=0.0, allow_inf_nan=False, description="Seconds since the cycle started"
    )


# ------------------------------------------------------------------
# Cycle settings
# ------------------------------------------------------------------

@cycle_router.post("/time")
async def set_time(req: TimeRequest):
    """
    Scrub to a time of day.

    Only sticks while autoplay is off; with autoplay on the next tick
    overwrites it from the wall clock.
    """
    try:
        cycle_config.update(current_time=req.current_time)
        stored = wrap_unit(req.current_time)
        logger.info(f"Time of day set to {stored:.4f} (requested {req.current_time})")
        return {"current_time": stored}
    except ConfigurationError as e:
        logger.warning(f"Rejected time of day: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Failed to set time of day", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@cycle_router.post("/autoplay")
async def set_autoplay(req: AutoPlayRequest):
    try:
        cycle_config.update(auto_play=req.auto_play)
        logger.info(f"Autoplay {'enabled' if req.auto_play else 'disabled'}")
        return {"auto_play": cycle_config.auto_play}
    except Exception as e:
        logger.error("Failed to toggle autoplay", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@cycle_router.post("/duration")
async def set_duration(req: DurationRequest):
    try:
        cycle_config.update(cycle_duration_seconds=req.cycle_duration_seconds)
        logger.info(f"Cycle duration set to {cycle_config.cycle_duration_seconds}s")
        return {"cycle_duration_seconds": cycle_config.cycle_duration_seconds}
    except ConfigurationError as e:
        logger.warning(f"Rejected cycle duration: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Failed to set cycle duration", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


# ------------------------------------------------------------------
# Frames
# ------------------------------------------------------------------

@cycle_router.post("/tick")
async def tick(req: TickRequest):
    """
    Run one tick by hand.

    Meant for stepping the cycle while the render loop is disabled.
    """
    if render_loop.is_running:
        raise HTTPException(
            status_code=409,
            detail="Render loop is running; manual ticks are only allowed while it is disabled"
        )

    try:
        frame = controller.tick(req.wall_clock_seconds)
        return frame.to_dict()
    except Exception as e:
        logger.error("Failed to tick cycle", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@cycle_router.get("/preview")
async def preview(time_of_day: float = Query(..., allow_inf_nan=False, description="Time of day to evaluate (wraps modulo 1)")):
    """Compute the channel values for any time of day without touching the scene."""
    try:
        return controller.compute_frame(time_of_day).to_dict()
    except Exception as e:
        logger.error("Failed to compute preview frame", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@cycle_router.get("/palette")
async def get_palette():
    return controller.palette.model_dump()


# ------------------------------------------------------------------
# State
# ------------------------------------------------------------------

@cycle_router.get("/state")
async def get_state():
    """
    Get current cycle settings and the last rendered frame.

    Useful for:
    - Debugging
    - UI state updates
    """
    try:
        frame = controller.last_frame
        return {
            **cycle_config.get_snapshot(),
            "render_loop_running": render_loop.is_running,
            "frame": frame.to_dict() if frame else None,
        }
    except Exception as e:
        logger.error("Failed to get state", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


# ============================================================================
# Register Routers
# ============================================================================

app.include_router(cycle_router)
