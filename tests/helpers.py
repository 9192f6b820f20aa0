"""Small builders shared by the test modules."""

from schedulegen.model import Course, Session


def make_session(
    day: str = "mon",
    start: str = "09:00",
    end: str = "10:20",
    room: str = "dc 1302",
    kind: str = "lec",
    name: str = "cs 240",
) -> Session:
    return Session(day=day, start_time=start, end_time=end, room=room, type=kind, name=name)


def make_course(name: str, *sessions: Session, course_id: str = "c1") -> Course:
    return Course(id=course_id, name=name, sessions=list(sessions))
