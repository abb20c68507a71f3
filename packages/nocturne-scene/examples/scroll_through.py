"""Headless scroll-through -- the night sky without a window.

Demonstrates:
- Starting a Timeline session against a MemoryHost
- Letting the arrow draw itself in before any scrolling
- Scrolling the page in fixed steps and reading each Frame
- Entrances latching into ambient drift, and staying there on the way back up
- Tearing the session down

Run: python -m examples.scroll_through
"""

from nocturne_scene import MemoryHost, SceneConfig, Timeline


def summarize(frame) -> str:
    arrow = frame.by_kind("arrow")
    shaft = arrow[0].strokes.get("shaft", 0.0) if arrow else 0.0
    visible = sum(1 for item in frame.items if item.opacity > 0.0 and item.kind != "arrow")
    drifting = sum(1 for item in frame.items if item.ambient)
    return (
        f"  frame {frame.frame_number:4d}  |  progress={frame.progress:.3f}  |  "
        f"shaft={shaft:.2f}  visible={visible:2d}  drifting={drifting:2d}"
    )


def main() -> None:
    print("=== Scroll-through ===\n")

    host = MemoryHost(offset=1800)
    timeline = Timeline(config=SceneConfig(fps=30))
    timeline.start(host)
    print(f"Host calls at session start: {host.calls}\n")

    # Four seconds of stillness: the arrow draws in.
    for _ in range(120):
        frame = timeline.frame()
    print(summarize(frame))

    # Scroll to the bottom in 20 steps, one second per step.
    step = timeline.scroll.scrollable / 20
    for _ in range(20):
        timeline.scroll_by(step)
        for _ in range(30):
            frame = timeline.frame()
        print(summarize(frame))

    # Back to the top: entrances rewind, drift keeps going.
    timeline.scroll_to_progress(0.0)
    print(summarize(timeline.frame()))

    timeline.teardown()
    print(f"\nDone. World empty after teardown: {not timeline.world.entities()}")


if __name__ == "__main__":
    main()
