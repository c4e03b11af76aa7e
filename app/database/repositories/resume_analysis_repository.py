import math

import psycopg
from psycopg.rows import dict_row

from app.database.connection import get_connection
from app.database.exceptions import AnalysisNotFoundError, PersistenceFailedError
from app.database.models import NewResumeAnalysis, ResumeAnalysisRecord

_MIN_ATS_SCORE = 0.0
_MAX_ATS_SCORE = 10.0


def validate_new_analysis(analysis: NewResumeAnalysis) -> None:
    """Enforce field invariants before insert.

    Raises:
        PersistenceFailedError: on the first violated invariant.
    """
    for field in ("file_name", "job_role", "ai_feedback", "user_id"):
        value = getattr(analysis, field)
        if not isinstance(value, str) or not value.strip():
            raise PersistenceFailedError(f"'{field}' must be a non-empty string")
    if not isinstance(analysis.resume_text, str):
        raise PersistenceFailedError("'resume_text' must be a string")
    score = analysis.ats_score
    if score is not None and (
        math.isnan(score) or not _MIN_ATS_SCORE <= score <= _MAX_ATS_SCORE
    ):
        raise PersistenceFailedError(
            f"'ats_score' must be between {_MIN_ATS_SCORE:g} and {_MAX_ATS_SCORE:g}, got {score}"
        )


class ResumeAnalysisRepository:
    """Database operations for the resume_analyses table."""

    def create(self, analysis: NewResumeAnalysis) -> ResumeAnalysisRecord:
        """Validate and insert one analysis, returning the stored row.

        Raises:
            PersistenceFailedError: if validation fails or the insert errors.
        """
        validate_new_analysis(analysis)
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        """
                        INSERT INTO resume_analyses
                        (file_name, job_role, resume_text, ai_feedback, ats_score, user_id)
                        VALUES (%s, %s, %s, %s, %s, %s)
                        RETURNING id, created_at, updated_at
                        """,
                        (
                            analysis.file_name.strip(),
                            analysis.job_role.strip(),
                            analysis.resume_text,
                            analysis.ai_feedback,
                            analysis.ats_score,
                            analysis.user_id,
                        ),
                    )
                    row = cur.fetchone()
                conn.commit()
        except psycopg.Error as exc:
            raise PersistenceFailedError(f"Failed to save analysis: {exc}") from exc

        if row is None:
            raise PersistenceFailedError("Insert returned no row")

        return ResumeAnalysisRecord(
            id=row["id"],
            file_name=analysis.file_name.strip(),
            job_role=analysis.job_role.strip(),
            resume_text=analysis.resume_text,
            ai_feedback=analysis.ai_feedback,
            ats_score=analysis.ats_score,
            user_id=analysis.user_id,
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )

    def list_by_user(self, user_id: str) -> list[ResumeAnalysisRecord]:
        """Return a user's analyses, newest first. Resume text is not loaded."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, file_name, job_role, ai_feedback, ats_score,
                           user_id, created_at, updated_at
                    FROM resume_analyses
                    WHERE user_id = %s
                    ORDER BY created_at DESC, id DESC
                    """,
                    (user_id,),
                )
                rows = cur.fetchall()

        return [
            ResumeAnalysisRecord(
                id=row["id"],
                file_name=row["file_name"],
                job_role=row["job_role"],
                resume_text="",
                ai_feedback=row["ai_feedback"],
                ats_score=row["ats_score"],
                user_id=row["user_id"],
                created_at=row["created_at"],
                updated_at=row["updated_at"],
            )
            for row in rows
        ]

    def find_for_user(self, analysis_id: int, user_id: str) -> ResumeAnalysisRecord:
        """Find an analysis owned by the given user.

        Raises:
            AnalysisNotFoundError: if no such analysis exists or another user owns it.
        """
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, file_name, job_role, resume_text, ai_feedback,
                           ats_score, user_id, created_at, updated_at
                    FROM resume_analyses
                    WHERE id = %s
                    """,
                    (analysis_id,),
                )
                row = cur.fetchone()

        if row is None or row["user_id"] != user_id:
            raise AnalysisNotFoundError(f"Analysis {analysis_id} not found")

        return ResumeAnalysisRecord(
            id=row["id"],
            file_name=row["file_name"],
            job_role=row["job_role"],
            resume_text=row["resume_text"],
            ai_feedback=row["ai_feedback"],
            ats_score=row["ats_score"],
            user_id=row["user_id"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
