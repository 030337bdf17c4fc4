"""Seed the database with demo data."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import json

from app.database import SessionLocal, engine, Base
import app.models  # noqa: F401

from app.models.user import User
from app.models.project import Project, ProjectLike
from app.models.comment import Comment, CommentLike
from app.services.auth_service import hash_password

DEMO_PASSWORD = "devconnect123"


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(User).count() > 0:
            print("Database already seeded. Skipping.")
            return

        # Users
        users = [
            User(name="Alice Kim", email="alice@example.com", password_hash=hash_password(DEMO_PASSWORD),
                 bio="Frontend engineer who loves React", location="Seoul", github="https://github.com/alice"),
            User(name="Bob Lee", email="bob@example.com", password_hash=hash_password(DEMO_PASSWORD),
                 bio="Backend developer, Python and Go", location="Busan"),
            User(name="Carol Park", email="carol@example.com", password_hash=hash_password(DEMO_PASSWORD),
                 bio="Data scientist"),
        ]
        db.add_all(users)
        db.flush()

        # Projects
        projects = [
            Project(title="React Portfolio", description="Personal portfolio site built with React and Tailwind",
                    github_link="https://github.com/alice/portfolio", live_link="https://alice.dev",
                    technologies_json=json.dumps(["React", "Tailwind"]), user_id=users[0].user_id),
            Project(title="Task API", description="REST API for task tracking",
                    github_link="https://github.com/bob/task-api",
                    technologies_json=json.dumps(["Python", "FastAPI", "PostgreSQL"]), user_id=users[1].user_id),
            Project(title="Churn Model", description="Customer churn prediction notebook and dashboard",
                    technologies_json=json.dumps(["pandas", "scikit-learn"]), user_id=users[2].user_id),
        ]
        db.add_all(projects)
        db.flush()

        likes = [
            ProjectLike(project_id=projects[0].project_id, user_id=users[1].user_id),
            ProjectLike(project_id=projects[0].project_id, user_id=users[2].user_id),
            ProjectLike(project_id=projects[1].project_id, user_id=users[0].user_id),
        ]
        db.add_all(likes)

        comments = [
            Comment(content="Clean design, nice work!", user_id=users[1].user_id, project_id=projects[0].project_id),
            Comment(content="Which auth library did you use?", user_id=users[0].user_id,
                    project_id=projects[1].project_id),
        ]
        db.add_all(comments)
        db.flush()
        db.add(CommentLike(comment_id=comments[0].comment_id, user_id=users[0].user_id))

        db.commit()
        print("Seed data inserted successfully.")
        print(f"  Users: {len(users)}")
        print(f"  Projects: {len(projects)}")
        print(f"  Project likes: {len(likes)}")
        print(f"  Comments: {len(comments)}")
        print()
        print("Test login credentials:")
        for u in users:
            print(f"  email={u.email}  password={DEMO_PASSWORD}  name={u.name}")

    except Exception as e:
        db.rollback()
        raise e
    finally:
        db.close()


if __name__ == "__main__":
    seed()
