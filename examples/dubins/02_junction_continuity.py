import os, sys, math
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
sys.path.append(os.path.join(PROJECT_ROOT, "src"))

from math import pi
from dubins_planner import synthesize, sample, angle_diff, DubinsPath

def check(path: DubinsPath, delta=1e-7, pos_tol=1e-5, ang_tol=1e-5):
    ok = True
    p = path.segment_params
    rho = path.turning_radius
    for i, b in enumerate((p[0] * rho, (p[0] + p[1]) * rho)):
        if not delta < b < path.length() - delta:
            continue
        q0 = sample(path, b - delta)
        q1 = sample(path, b + delta)
        dp = math.hypot(q1[0] - q0[0], q1[1] - q0[1])
        if dp > pos_tol:
            print(f"Pos mismatch at junction {i}->{i+1}: {dp}")
            ok = False
        dh = abs(angle_diff(q1[2], q0[2]))
        if dh > ang_tol:
            print(f"Heading mismatch at junction {i}->{i+1}: {dh}")
            ok = False
    return ok

def main():
    start = (50.0, 50.0, pi/6)
    R = 40.0
    for end in [(220.0, 80.0, -pi/3), (60.0, 60.0, pi), (50.0, 50.0, pi/6 + pi)]:
        path = synthesize(start, end, R)
        print(path.word.name, "continuity OK:", check(path))

if __name__ == "__main__":
    main()
