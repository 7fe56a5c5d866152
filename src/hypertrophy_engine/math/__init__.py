"""Pure training math: profile metrics, landmarks, progression, intensity, readiness."""
