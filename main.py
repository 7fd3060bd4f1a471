import asyncio
import logging
import sys
import os
import argparse

from core.config_loader import load_config
from core.app_context import AppContext
from core.exceptions import ApiError
from core.ranking import SearchFilters, SortBy
from core.scorer import ScoringAlgorithm, format_score

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def print_cohort(ranked):
    """Print a ranked cohort as a plain table."""
    for position, entry in enumerate(ranked, start=1):
        missing = ", ".join(s.name for s in entry.match.missing_skills) or "-"
        line = f"{position:>3}. {entry.title} - {entry.match.match_percentage}% match"
        if entry.is_scored:
            line += f" ({format_score(entry.job.score)}, {entry.score_percentage:.0f}% of cohort)"
        print(line)
        print(f"     missing: {missing}")


def print_skill_demand(context: AppContext):
    service = context.skill_gap_service
    report = service.skill_demand()
    print("\nMost requested skills:")
    for entry in report.top(context.config.analysis.top_skills_limit):
        marker = "✓" if entry.has_skill else " "
        print(f"  [{marker}] {entry.skill_name}: {entry.count}")

    summary = service.summary()
    print(
        f"\n{summary.job_count} jobs, average match {summary.average_match}%, "
        f"{summary.skills_to_learn} skills to learn"
    )


async def login_if_configured(context: AppContext, args, required: bool = False) -> bool:
    email = args.email or os.environ.get("SKILLSCOUT_EMAIL")
    password = os.environ.get("SKILLSCOUT_PASSWORD")
    if not (email and password):
        if required:
            logger.error("Set --email and SKILLSCOUT_PASSWORD to use this mode")
        return False
    await context.auth.login(email, password)
    return True


async def run_search(context: AppContext, args) -> int:
    await login_if_configured(context, args)

    skills = [s for s in (args.skills or "").split(",")]
    service = context.skill_gap_service
    await service.search(args.job_title, skills)

    filters = SearchFilters(sort_by=SortBy(args.sort_by), show_only_missing=args.only_missing)
    print_cohort(service.ranked(filters))
    print_skill_demand(context)

    if args.export:
        path = service.save_csv(filters.sort_by)
        logger.info(f"CSV written to {path}")
    return 0


async def run_recommend(context: AppContext, args) -> int:
    if not await login_if_configured(context, args, required=True):
        return 2

    service = context.skill_gap_service
    snapshot = await service.recommend(ScoringAlgorithm(args.algorithm))
    top = snapshot.recommendation.top_job

    print(f"Top match ({snapshot.algorithm.label}): {top.title} - {format_score(top.score)}")
    if top.missing_skills:
        print(f"Skills to learn: {', '.join(s.name for s in top.missing_skills)}")
    print()
    print_cohort(service.ranked(SearchFilters(sort_by=SortBy.MATCH_PERCENTAGE_DESC)))
    return 0


async def run_cli(args) -> int:
    config = load_config(args.config)
    context = AppContext.build(config)
    try:
        if args.mode == 'search':
            return await run_search(context, args)
        return await run_recommend(context, args)
    except ApiError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        return 1
    finally:
        await context.close()


def main():
    parser = argparse.ArgumentParser(description="SkillScout - skill gap analysis")
    parser.add_argument('--mode', type=str, choices=['serve', 'search', 'recommend'], default='serve',
                        help='serve (default): run the web backend; search: skill search; '
                             'recommend: algorithm recommendation')
    parser.add_argument('--config', type=str, default=None, help='Path to config.yaml')
    parser.add_argument('--job-title', type=str, help='Job title to search for (search mode)')
    parser.add_argument('--skills', type=str, default='', help='Comma-separated skills (search mode)')
    parser.add_argument('--algorithm', type=str, choices=[a.value for a in ScoringAlgorithm],
                        default=ScoringAlgorithm.LLR.value, help='Scoring algorithm (recommend mode)')
    parser.add_argument('--sort-by', type=str, choices=[s.value for s in SortBy],
                        default=SortBy.MISSING_SKILLS_ASC.value)
    parser.add_argument('--only-missing', action='store_true', help='Only jobs with skill gaps')
    parser.add_argument('--export', action='store_true', help='Write every job of the search result as CSV')
    parser.add_argument('--email', type=str, default=None,
                        help='Account email (password from SKILLSCOUT_PASSWORD)')
    args = parser.parse_args()

    logger.info(f"SkillScout starting in {args.mode.upper()} mode...")

    if args.mode == 'serve':
        if args.config:
            os.environ["SKILLSCOUT_CONFIG"] = args.config
        from web.backend.app import main as serve
        serve()
        return

    if args.mode == 'search' and not args.job_title:
        parser.error("--job-title is required in search mode")

    sys.exit(asyncio.run(run_cli(args)))


if __name__ == "__main__":
    main()
