from flask import (
    Blueprint,
    abort,
    current_app,
    redirect,
    render_template,
    request,
    url_for,
)

from scorekeeper import get_state
from scorekeeper.course import DEFAULT_HOLE_PAR, HOLE_COUNT, Course, Player, blank_pars
from scorekeeper.round_state import MAX_PLAYERS, Phase
from scorekeeper.scoring import clamp_stroke, format_relative

main = Blueprint("main", __name__)

PAR_CHOICES = (3, 4, 5)


@main.app_template_filter("relative")
def relative_filter(to_par):
    return format_relative(to_par)


def _form_int(name, default=None):
    try:
        return int(request.form.get(name, default))
    except (TypeError, ValueError):
        return default


@main.route("/")
def course_list():
    state = get_state(current_app)
    return render_template("courses.html", courses=state.courses)


@main.route("/courses/new")
def new_course():
    return render_template(
        "course_editor.html", pars=blank_pars(), par_choices=PAR_CHOICES
    )


@main.route("/courses", methods=["POST"])
def add_course():
    state = get_state(current_app)
    name = request.form.get("name", "").strip()
    pars = []
    for hole in range(1, HOLE_COUNT + 1):
        par = _form_int(f"par_{hole}", DEFAULT_HOLE_PAR)
        pars.append(max(PAR_CHOICES[0], min(par, PAR_CHOICES[-1])))
    state.add_course(Course(name=name, pars=tuple(pars)))
    return redirect(url_for("main.course_list"))


@main.route("/players", methods=["POST"])
def add_player():
    state = get_state(current_app)
    state.add_player(Player(name=request.form.get("name", "").strip()))
    next_url = request.form.get("next", "")
    if not next_url.startswith("/") or next_url.startswith("//"):
        next_url = url_for("main.course_list")
    return redirect(next_url)


@main.route("/courses/<course_id>/players", methods=["GET", "POST"])
def select_players(course_id):
    state = get_state(current_app)
    course = state.find_course(course_id)
    if course is None:
        abort(404)

    if request.method == "POST":
        if request.form.get("action") != "start":
            return redirect(url_for("main.select_players", course_id=course.id))

        chosen = []
        for player_id in request.form.getlist("player"):
            player = state.find_player(player_id)
            if player is not None and player not in chosen:
                chosen.append(player)
        # Only four player slots on the form
        chosen = chosen[:MAX_PLAYERS]

        state.select_course(course)
        state.select_players(chosen)
        state.start_round()
        current_app.logger.info(
            "Round started from form: %s", ", ".join(p.name for p in chosen) or "no players"
        )
        return redirect(url_for("main.hole"))

    return render_template(
        "select_players.html",
        course=course,
        players=state.players,
        slots=range(MAX_PLAYERS),
    )


@main.route("/hole", methods=["GET", "POST"])
def hole():
    state = get_state(current_app)
    round_ = state.round
    if round_ is None:
        return render_template("hole.html", round=None)

    if state.phase is Phase.ROUND_COMPLETE:
        return redirect(url_for("main.finish"))

    if request.method == "POST":
        # Resubmitted pages from an earlier hole must not land on this one
        if _form_int("hole") != round_.current_hole:
            current_app.logger.info(
                "Ignored stale hole form (posted %s, current %d)",
                request.form.get("hole"),
                round_.current_hole,
            )
            return redirect(url_for("main.hole"))

        for index in range(len(round_.entries)):
            score = _form_int(f"score_{index}")
            if score is None:
                continue
            state.record_stroke(index, clamp_stroke(score))

        action = request.form.get("action", "next")
        if action == "back":
            state.retreat_hole()
        elif action == "finish":
            state.finish_round()
        else:
            state.advance_hole()

        if state.phase is Phase.ROUND_COMPLETE:
            return redirect(url_for("main.finish"))
        return redirect(url_for("main.hole"))

    rows = [
        {
            "index": index,
            "name": entry.player.name,
            "score": entry.scores[round_.current_hole - 1],
            "relative": round_.running_relative(entry),
        }
        for index, entry in enumerate(round_.entries)
    ]
    return render_template(
        "hole.html",
        round=round_,
        hole=round_.current_hole,
        par=round_.current_par,
        rows=rows,
        last_hole=HOLE_COUNT,
    )


@main.route("/finish")
def finish():
    state = get_state(current_app)
    round_ = state.round
    if round_ is None:
        return render_template("finish.html", round=None)

    rows = [
        {
            "name": entry.player.name,
            "total": entry.total,
            "relative": round_.final_relative(entry),
        }
        for entry in round_.leaderboard()
    ]
    return render_template(
        "finish.html",
        round=round_,
        course=round_.course,
        rows=rows,
        total_par=round_.course.total_par,
    )
