import argparse
import json
import logging
import sys
from datetime import date, timedelta
from pathlib import Path

from pydantic import ValidationError

from fuel.infra.csv_export import grocery_to_csv, plan_to_csv
from fuel.infra.ics_export import plan_to_ics
from fuel.infra.pdf_utils import generate_pdf_for_plan
from fuel.logic.errors import PlanningError
from fuel.logic.hydration.model import format_water_ml
from fuel.logic.planning.week_planner import build_training_week, build_week
from fuel.logic.shopping.list_builder import aggregate_grocery_list
from fuel.logic.taper.checklist import build_taper
from fuel.utilities import config
from fuel.utilities.constants import DEFAULT_ATHLETE, DEFAULT_COMPETITION
from fuel.utilities.validators import PlanRequest

logger = logging.getLogger("fuel_app")


def _current_week_start() -> str:
    today = date.today()
    # isoweekday: Monday=1 .. Sunday=7
    return (today - timedelta(days=today.isoweekday() % 7)).isoformat()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate a weekly fueling plan for an adolescent athlete.")
    parser.add_argument("--week-start", default=None, help="Sunday the week starts on (YYYY-MM-DD)")
    parser.add_argument("--mode", choices=["standard", "light"], default=config.PLAN_MODE)
    parser.add_argument("--weight", type=float, default=config.ATHLETE_WEIGHT_KG, help="Bodyweight in kg")
    parser.add_argument("--age", type=int, default=DEFAULT_ATHLETE["age"])
    parser.add_argument("--competition", default=DEFAULT_COMPETITION["start"], help="Competition start date")
    parser.add_argument("--competition-end", default=DEFAULT_COMPETITION["end"])
    parser.add_argument("--export", type=Path, nargs="?", const=config.EXPORT_DIR, default=None,
                        help="Directory to write PDF/CSV/ICS/JSON exports (default: EXPORT_DIR)")
    return parser.parse_args(argv)


def build_request(args) -> PlanRequest:
    week_start = args.week_start or _current_week_start()
    training = [t.to_dict() for t in build_training_week(week_start, is_light=args.mode == "light")]
    athlete = dict(DEFAULT_ATHLETE, age=args.age, weightKg=args.weight)
    return PlanRequest.model_validate({
        "athlete": athlete,
        "training": training,
        "planMode": args.mode,
        "competitionStart": args.competition,
        "competitionEnd": args.competition_end,
    })


def write_exports(out_dir: Path, plan, taper, groceries):
    out_dir.mkdir(parents=True, exist_ok=True)
    base = config.EXPORT_BASENAME
    (out_dir / f"{base}.pdf").write_bytes(generate_pdf_for_plan(plan, taper=taper, groceries=groceries))
    (out_dir / f"{base}.csv").write_text(plan_to_csv(plan), encoding="utf-8")
    (out_dir / f"{base}.ics").write_bytes(plan_to_ics(plan))
    (out_dir / "groceries.csv").write_text(grocery_to_csv(groceries), encoding="utf-8")
    with open(out_dir / f"{base}.json", "w", encoding="utf-8") as f:
        json.dump(plan.to_dict(), f, indent=2, ensure_ascii=False)
    logger.info("Exports written to %s", out_dir)


def main(argv=None) -> int:
    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = parse_args(argv)
    try:
        request = build_request(args)
        athlete = request.athlete.to_domain()
        plan = build_week(athlete, request.training_days(), request.macro_profile())
        taper = build_taper(request.competition_start)
    except (ValidationError, PlanningError) as e:
        logger.error("Could not build plan: %s", e)
        return 2

    groceries = aggregate_grocery_list(plan)
    print(f"Week of {plan.start_date} ({plan.timezone}) for {athlete}")
    print(f"Hydration: {format_water_ml(athlete.weight_kg)}")
    for day in plan.days:
        t = day.totals
        print(f"  {day.date}: {t['kcal']} kcal • P {t['p']} g • F {t['f']} g • C {t['c']} g • water {day.water_ml} mL")
    print(f"Taper: {taper[0]['date']} -> {taper[-1]['date']}, grocery rows: {len(groceries)}")

    if args.export:
        write_exports(args.export, plan, taper, groceries)
    return 0


if __name__ == "__main__":
    sys.exit(main())
