"""
Seed a development database with sample catalogue content.

Purpose:
- Give a fresh local database something to list, search and feature
- SAFE to run multiple times (tutorials/projects are keyed by slug,
  resources/roadmaps/challenges by title)

Run manually: python scripts/seed_content.py
"""
import sys
import os
from datetime import timedelta

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sqlalchemy.orm import Session

import app.main  # noqa: F401  (creates tables)
from app.challenges.handlers import create_challenge
from app.challenges.models import Challenge
from app.core.text import slugify
from app.db.base import utcnow
from app.db.session import SessionLocal
from app.projects.handlers import create_project
from app.projects.models import Project
from app.resources.handlers import create_resource
from app.resources.models import Resource
from app.roadmaps.handlers import create_roadmap
from app.roadmaps.models import Roadmap
from app.tutorials.handlers import create_tutorial
from app.tutorials.models import Tutorial

TUTORIALS = [
    {
        "title": "React Hooks in Depth",
        "description": "Learn useState, useEffect and custom hooks with practical examples.",
        "content": (
            "# Why hooks\nHooks let function components hold state.\n\n"
            "# useState\nKeep local state in a function component.\n\n"
            "# useEffect\nSynchronise a component with an external system.\n\n"
            "# Custom hooks\nExtract reusable stateful logic into your own hooks."
        ),
        "tech_stack": ["react", "javascript"],
        "difficulty": "intermediate",
        "estimated_time": 45,
    },
    {
        "title": "Python Basics for Beginners",
        "description": "Variables, control flow and functions explained from first principles.",
        "content": (
            "# Variables\nNames bound to values.\n\n"
            "# Control flow\nif, for and while statements.\n\n"
            "# Functions\nReusable blocks of code with parameters and return values. "
            "Practice each section before moving on."
        ),
        "tech_stack": ["python"],
        "difficulty": "beginner",
        "estimated_time": 30,
    },
]

PROJECTS = [
    {
        "title": "Realtime Chat App",
        "description": "Build a websocket chat server and a small web client from scratch.",
        "tech_stack": ["python", "fastapi", "websockets"],
        "difficulty": "advanced",
    },
]

RESOURCES = [
    {
        "title": "Git Cheat Sheet",
        "description": "The git commands you reach for every day, on one page.",
        "category": "cheatsheets",
        "file_url": "https://cdn.thinkhub.dev/files/git-cheatsheet.pdf",
        "file_size": 245760,
        "file_type": "application/pdf",
    },
]


def seed_content():
    db: Session = SessionLocal()

    try:
        created = 0
        skipped = 0

        for data in TUTORIALS:
            if db.query(Tutorial).filter(Tutorial.slug == slugify(data["title"])).first():
                skipped += 1
                continue
            create_tutorial(db, **data)
            created += 1

        for data in PROJECTS:
            if db.query(Project).filter(Project.slug == slugify(data["title"])).first():
                skipped += 1
                continue
            create_project(db, **data)
            created += 1

        for data in RESOURCES:
            if db.query(Resource).filter(Resource.title == data["title"]).first():
                skipped += 1
                continue
            create_resource(db, **data)
            created += 1

        first_tutorial = db.query(Tutorial).order_by(Tutorial.id.asc()).first()

        if not db.query(Roadmap).filter(Roadmap.title == "Frontend Developer Path").first():
            create_roadmap(
                db,
                title="Frontend Developer Path",
                description="From HTML basics to production React applications.",
                category="frontend",
                nodes=[
                    {
                        "id": "react-hooks",
                        "title": "React Hooks",
                        "description": "State and effects in function components",
                        "tutorial_id": first_tutorial.id if first_tutorial else None,
                        "project_id": None,
                        "position": {"x": 0, "y": 0},
                    },
                ],
            )
            created += 1
        else:
            skipped += 1

        if not db.query(Challenge).filter(Challenge.title == "Weekly Hooks Challenge").first():
            now = utcnow()
            create_challenge(
                db,
                title="Weekly Hooks Challenge",
                description="Finish the React Hooks tutorial this week to earn points.",
                type="tutorial",
                points_reward=100,
                start_date=now,
                end_date=now + timedelta(days=7),
                tutorial_id=first_tutorial.id if first_tutorial else None,
            )
            created += 1
        else:
            skipped += 1

        print(f"Seeding complete. Created: {created}, Skipped: {skipped}")

    finally:
        db.close()


if __name__ == "__main__":
    seed_content()
