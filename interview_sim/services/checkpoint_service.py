"""
Checkpoint service - durable namespaced key/value state.

Callers save a checkpoint after every state-mutating operation. A stored
payload that cannot be decoded is discarded and reported as absent so the
caller falls back to its initial state.
"""
import json
import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from interview_sim.db.models.checkpoint import Checkpoint

logger = logging.getLogger(__name__)


def checkpoint_key(namespace: str, identifier: str) -> str:
    """Build a namespaced key such as 'interview:3f2a...'."""
    return f"{namespace}:{identifier}"


def save_checkpoint(db: Session, key: str, payload: Dict[str, Any]) -> None:
    """
    Store (or replace) the payload under key.

    Args:
        db: Database session
        key: Namespaced checkpoint key
        payload: JSON-compatible dictionary
    """
    data = json.dumps(payload)
    row = db.get(Checkpoint, key)
    if row is None:
        db.add(Checkpoint(key=key, payload=data))
    else:
        row.payload = data
    db.commit()


def discard_checkpoint(db: Session, key: str) -> bool:
    """Delete a checkpoint. Returns True if one existed."""
    row = db.get(Checkpoint, key)
    if row is None:
        return False
    db.delete(row)
    db.commit()
    return True


def load_checkpoint(db: Session, key: str) -> Optional[Dict[str, Any]]:
    """
    Load the payload stored under key.

    Returns:
        The decoded dictionary, or None when missing or undecodable
    """
    row = db.get(Checkpoint, key)
    if row is None:
        return None

    try:
        payload = json.loads(row.payload)
    except (TypeError, ValueError) as e:
        logger.warning(f"Discarding corrupt checkpoint {key}: {e}")
        discard_checkpoint(db, key)
        return None

    if not isinstance(payload, dict):
        logger.warning(f"Discarding checkpoint {key}: payload is not an object")
        discard_checkpoint(db, key)
        return None

    return payload
