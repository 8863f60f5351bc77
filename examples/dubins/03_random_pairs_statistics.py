import os, sys, random, math, statistics
from collections import Counter
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
sys.path.append(os.path.join(PROJECT_ROOT, "src"))

from dubins_planner import synthesize, NoPath

def main():
    random.seed(0)
    N = 1000
    R = 40.0
    lengths = []
    words = Counter()
    no_path = 0

    for _ in range(N):
        x0, y0 = random.uniform(0,200), random.uniform(0,200)
        th0 = random.uniform(-math.pi, math.pi)
        xf, yf = random.uniform(0,200), random.uniform(0,200)
        thf = random.uniform(-math.pi, math.pi)
        try:
            path = synthesize((x0,y0,th0),(xf,yf,thf),R)
        except NoPath:
            no_path += 1
            continue
        lengths.append(path.length())
        words[path.word.name] += 1

    def stats(arr):
        return dict(mean=statistics.mean(arr), median=statistics.median(arr), min=min(arr), max=max(arr))

    print("No path:", no_path, "stats:", stats(lengths) if lengths else None)
    print("Selected words:", dict(words.most_common()))

if __name__ == "__main__":
    main()
