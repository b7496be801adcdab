import unittest

from soniox_transcribe.utils import Timer, generate_id


class TimerTests(unittest.TestCase):
    def test_elapsed_uses_injected_clock(self) -> None:
        ticks = iter([10.0, 10.125])
        timer = Timer.start(lambda: next(ticks))

        self.assertAlmostEqual(timer.elapsed_ms(), 125.0)

    def test_elapsed_non_negative(self) -> None:
        timer = Timer(start_s=5.0, clock=lambda: 4.0)
        self.assertEqual(timer.elapsed_s(), 0.0)


class GenerateIdTests(unittest.TestCase):
    def test_ids_are_prefixed_and_unique(self) -> None:
        ids = {generate_id("soniox") for _ in range(50)}
        self.assertEqual(len(ids), 50)
        self.assertTrue(all(value.startswith("soniox-") for value in ids))


if __name__ == "__main__":
    unittest.main()
