from gherkin_context.config import configure_logging, load_settings
from gherkin_context.hooks import ContextTracker


def before_all(context):
    settings = load_settings()
    configure_logging(settings)
    context.tracker = ContextTracker(settings=settings)


def before_feature(context, feature):
    context.tracker.before_feature(context, feature)


def before_scenario(context, scenario):
    context.tracker.before_scenario(context, scenario)


def before_step(context, step):
    context.tracker.before_step(context, step)


def after_step(context, step):
    context.tracker.after_step(context, step)


def after_scenario(context, scenario):
    context.tracker.after_scenario(context, scenario)


def after_feature(context, feature):
    context.tracker.after_feature(context, feature)
