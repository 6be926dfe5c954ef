from psycopg.types.json import Jsonb

from studynotes.database.connection import get_connection

ActivityValue = str | int | float | bool | None


class ActivityRepository:
    """Writes user activity events into the user_activities table."""

    def log_activity(
        self,
        user_id: str,
        activity_type: str,
        activity_data: dict[str, ActivityValue],
    ) -> None:
        """Insert one activity event with an open-ended JSONB payload."""
        for key, value in activity_data.items():
            if not isinstance(value, (str, int, float, bool)) and value is not None:
                raise ValueError(
                    f"activity_data['{key}'] must be a primitive, got {type(value).__name__}"
                )
        with get_connection() as conn:
            conn.execute(
                """
                INSERT INTO user_activities (user_id, activity_type, activity_data)
                VALUES (%s, %s, %s)
                """,
                (user_id, activity_type, Jsonb(activity_data)),
            )
            conn.commit()
