"""
Reset every user's AI tutor counter for the current UTC day.

Counters also reset lazily on first read each day, so this is optional:
schedule it at 00:00 UTC to keep analytics (total_ai_queries) accurate
for users who have not come back yet.
"""
import sys
import os

# Add the parent directory to the path so we can import app modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app.auth.models import User
from app.db.base import utcnow
from app.db.session import SessionLocal


def reset_ai_usage() -> bool:
    """Zero ai_queries_used_today for every user and stamp today's date."""
    db = SessionLocal()
    today = utcnow().date()

    try:
        updated = db.query(User).update(
            {User.ai_queries_used_today: 0, User.ai_queries_reset_on: today},
            synchronize_session=False,
        )
        db.commit()
        print(f"SUCCESS: reset AI usage for {updated} user(s), day={today.isoformat()}")
        return True

    except Exception as e:
        db.rollback()
        print(f"ERROR: Failed to reset AI usage: {str(e)}")
        return False
    finally:
        db.close()


if __name__ == "__main__":
    print("Resetting daily AI usage counters...")
    print("-" * 50)

    if reset_ai_usage():
        print("-" * 50)
        print("AI usage reset complete!")
    else:
        print("-" * 50)
        print("AI usage reset failed!")
        sys.exit(1)
