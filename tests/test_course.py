import pytest

from scorekeeper.course import (
    DEFAULT_COURSE_NAME,
    HOLE_COUNT,
    Course,
    Player,
    blank_pars,
    default_course,
)


def test_course_keeps_eighteen_pars(course):
    assert len(course.pars) == HOLE_COUNT
    assert course.total_par == 72
    assert course.par_for(1) == 4
    assert course.par_for(18) == 4


def test_course_pars_are_stored_as_tuple():
    course = Course(name="List Input", pars=[4] * 18)
    assert course.pars == (4,) * 18


@pytest.mark.parametrize("pars", [[4] * 17, [4] * 19, [4] * 17 + [0], [4] * 17 + ["5"]])
def test_course_rejects_bad_pars(pars):
    with pytest.raises(ValueError):
        Course(name="Broken", pars=pars)


def test_course_is_immutable(course):
    with pytest.raises(AttributeError):
        course.name = "Renamed"


def test_records_get_distinct_ids():
    a = Player(name="Sam")
    b = Player(name="Sam")
    assert a.id != b.id
    assert a != b


def test_blank_pars_default_to_four():
    assert blank_pars() == (4,) * 18


def test_default_course():
    course = default_course()
    assert course.name == DEFAULT_COURSE_NAME
    assert course.par_for(1) == 5
    assert course.total_par == 72
