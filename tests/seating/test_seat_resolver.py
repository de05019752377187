from src.exam_attendance.exam_attendance.seating.model import SeatingAssignment, SeatingGroup
from src.exam_attendance.exam_attendance.seating.resolver import SeatResolver
from src.exam_attendance.exam_attendance.students.model import Student


def _group(arrangement_id: str, *pairs: tuple[str, str]) -> SeatingGroup:
    return SeatingGroup(
        arrangement_id=arrangement_id,
        exam_id="E",
        assignments=tuple(SeatingAssignment(seat_no=seat, reg_no=reg) for reg, seat in pairs),
    )


def test_resolves_by_registration_number():
    students = [Student.create(student_id="A", reg_no="R1", name="Alice")]
    resolver = SeatResolver(students, [_group("g1", ("R9", "B01"), ("R1", "A12"))])

    assert resolver.resolve_seat("A") == "A12"


def test_unknown_student_and_missing_assignment_resolve_to_none():
    students = [Student.create(student_id="A", reg_no="R1", name="Alice")]
    resolver = SeatResolver(students, [_group("g1", ("R2", "B01"))])

    assert resolver.resolve_seat("missing") is None
    assert resolver.resolve_seat("A") is None
    assert resolver.has_assignment("A") is False


def test_first_group_with_a_match_wins():
    students = [Student.create(student_id="A", reg_no="R1", name="Alice")]
    resolver = SeatResolver(students, [_group("g1", ("R2", "X1")), _group("g2", ("R1", "C03")), _group("g3", ("R1", "D04"))])

    assert resolver.resolve_seat("A") == "C03"


def test_students_sharing_a_registration_number_share_the_seat():
    students = [
        Student.create(student_id="A", reg_no="R1", name="Alice"),
        Student.create(student_id="A2", reg_no="R1", name="Alice Duplicate"),
    ]
    resolver = SeatResolver(students, [_group("g1", ("R1", "A12"))])

    assert resolver.resolve_seat("A") == resolver.resolve_seat("A2") == "A12"
