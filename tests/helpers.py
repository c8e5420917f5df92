# Raw course payload builders shared by the generator and planner tests.


def section(days, start, end, labs=()):
    return {"days": days, "start_time": start, "end_time": end, "labs": list(labs)}


def lab(days, start, end):
    return {"days": days, "start_time": start, "end_time": end}


def course(prefix, code, *sections):
    return {"prefix": prefix, "code": code, "sections": list(sections)}
