"""
Microbenchmark: time per step vs number of bodies.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from gravity_sim import Simulation, Body, Profiler

def run(n: int, steps: int = 300):
    prof = Profiler()
    sim = Simulation(G=1.0, dt=1e-3, softening=0.05, profiler=prof)

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)
    for _ in range(n):
        pos = rng.uniform(-10.0, 10.0, size=2)
        vel = rng.normal(0.0, 0.1, size=2)
        sim.add_body(Body(position=pos, velocity=vel, mass=float(rng.uniform(0.5, 2.0))))

    # warmup
    sim.run(10)
    prof.reset()

    t0 = time.perf_counter()
    sim.run(steps)
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()

if __name__ == "__main__":
    for n in [2, 3, 10, 50, 100]:
        per_step, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["forces", "integrate"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
