import os

from hypothesis import settings, HealthCheck

settings.register_profile("default", max_examples=100)
settings.register_profile(
    "ci",
    max_examples=1000,
    derandomize=True,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))
