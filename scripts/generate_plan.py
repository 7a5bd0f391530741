"""
scripts/generate_plan.py
────────────────────────────────────────────────────────────────────────
Run the profile → plan pipeline once from the shell:

    python -m scripts.generate_plan --name Ana --age 30 --height 175 \
        --weight 70 --activity moderate --diet vegetarian --goal weight-loss

Print only the metrics and the prompt (no API call):

    python -m scripts.generate_plan ... --dry-run
"""
from __future__ import annotations

import asyncio
import json
import logging
import sys
from argparse import ArgumentParser, Namespace
from dotenv import load_dotenv
load_dotenv()

from config import settings
from core.errors import USER_FACING_PLAN_ERROR
from core.models.profile import ActivityLevel, HealthGoal, Profile
from core.nutrition_calc import compute_metrics
from core.plan_pipeline import generate_plan
from core.plan_request import build_plan_prompt
from core.session import NutritionSession


def _parser() -> ArgumentParser:
    ap = ArgumentParser(description="Generate a one-day meal plan")
    ap.add_argument("--name", default="Guest")
    ap.add_argument("--age", type=int, required=True)
    ap.add_argument("--height", type=float, required=True, help="cm")
    ap.add_argument("--weight", type=float, required=True, help="kg")
    ap.add_argument("--activity", choices=[a.value for a in ActivityLevel], default="sedentary")
    ap.add_argument("--diet", default="none", help="dietary preference")
    ap.add_argument("--allergies", default=None)
    ap.add_argument("--culture", default=None, help="cultural preference")
    ap.add_argument("--goal", choices=[g.value for g in HealthGoal], default="maintain")
    ap.add_argument("--dry-run", action="store_true", help="skip the API call")
    return ap


def _profile(args: Namespace) -> Profile:
    return Profile(
        name=args.name,
        age=args.age,
        height_cm=args.height,
        weight_kg=args.weight,
        activity_level=args.activity,
        dietary_preference=args.diet,
        health_goal=args.goal,
        allergies=args.allergies,
        cultural_preference=args.culture,
    )


# ───────────────────────────────
# CLI entrypoint
# ───────────────────────────────
async def _async_main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    profile = _profile(args)

    if args.dry_run:
        m = compute_metrics(profile)
        print(json.dumps({"bmi": m.bmi, "calories": m.calories}, indent=2))
        print(build_plan_prompt(profile, m.calories))
        return 0

    outcome = await generate_plan(NutritionSession(), profile)
    if not outcome.ok:
        print(USER_FACING_PLAN_ERROR, file=sys.stderr)
        return 1

    print(json.dumps(
        {
            "metrics": {"bmi": outcome.metrics.bmi, "calories": outcome.metrics.calories},
            "plan": outcome.plan.model_dump(),
            "anomalies": list(outcome.anomalies),
        },
        indent=2,
    ))
    return 0


if __name__ == "__main__":  # pragma: no cover
    logging.basicConfig(level=settings.log_level.upper())
    sys.exit(asyncio.run(_async_main()))
