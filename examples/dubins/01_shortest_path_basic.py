import os, sys
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
sys.path.append(PROJECT_ROOT)
sys.path.append(os.path.join(PROJECT_ROOT, "src"))

from math import pi
import matplotlib.pyplot as plt
from dubins_planner import synthesize, dubins_candidates, segment_length
from visuals.plotting_dubins import plot_path, plot_pose, plot_samples, finalize_axes, PlotStyle

def main():
    start = (0.0, 0.0, pi/4)
    end = (6.0, 2.0, -pi/2)
    R = 1.5

    path = synthesize(start, end, R)
    print("Word:", path.word.name)
    print("Segment lengths:", [round(segment_length(path, i), 4) for i in range(3)])
    print("Total length:", path.length())
    for word, params in dubins_candidates(start, end, R).items():
        print(f"  {word.name}: {'infeasible' if params is None else round(sum(params) * R, 4)}")

    fig, ax = plt.subplots(figsize=(7,7))
    style = PlotStyle(show_centers=True, arrow_every=15, arrow_scale=0.8)
    plot_path(ax, path, style)
    plot_samples(ax, path, 0.5, style)
    plot_pose(ax, start)
    plot_pose(ax, end)
    finalize_axes(ax, title=f"Shortest Dubins path ({path.word.name})")
    plt.show()

if __name__ == "__main__":
    main()
