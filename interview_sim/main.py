import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

# ✅ Import All API Routes
from interview_sim.api.routes import candidates, health, interview, resume

# ✅ Import Core Services
from interview_sim.core import config
from interview_sim.core.logging_config import setup_logging
from interview_sim.db.init_db import init_db
from interview_sim.db.session import get_db
from interview_sim.services import interview_service
from interview_sim.services.countdown import Countdown
from interview_sim.services.interview_service import SessionNotFound

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.LOG_LEVEL)
    init_db()
    logger.info("Interview Simulator API started")
    yield


# ============================================
# ✅ FASTAPI APP INIT
# ============================================

app = FastAPI(title="Interview Simulator", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT"],
    allow_headers=["Content-Type"],
)


# ============================================
# ✅ REGISTER ALL ROUTERS
# ============================================

app.include_router(health.router)
app.include_router(resume.router)
app.include_router(interview.router)
app.include_router(candidates.router)


# ============================================
# ✅ SERVER-DRIVEN INTERVIEW COUNTDOWN
# ============================================

@app.websocket("/ws/interview/{session_key}")
async def interview_countdown(websocket: WebSocket, session_key: str, db: Session = Depends(get_db)):
    await websocket.accept()

    try:
        session = interview_service.load_session(db, session_key)
    except SessionNotFound:
        await websocket.close(code=4404)
        return

    async def push_state(current):
        state = interview_service.build_state_response(session_key, current)
        await websocket.send_json(state.model_dump(mode="json"))

    try:
        await push_state(session)
        if session.is_active:
            countdown = Countdown(lambda: interview_service.tick(db, session_key))
            ticks = await countdown.run(on_tick=push_state)
            logger.debug(f"Countdown finished: session_key={session_key}, ticks={ticks}")
        await websocket.close()

    except WebSocketDisconnect:
        logger.info(f"Countdown client disconnected: session_key={session_key}")


# ============================================
# ✅ HEALTH CHECK ROOT ENDPOINT
# ============================================

@app.get("/")
def root():
    return {"status": "Interview Simulator API running"}
