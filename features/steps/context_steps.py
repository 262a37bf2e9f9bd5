from behave import given, then, use_step_matcher

from gherkin_context.context.attributes import Attribute

use_step_matcher("re")


def _last_step_text(context) -> str:
    return context.tracker.last("step").text


@given(r"the feature source is indexed")
def step_feature_indexed(context):
    feature = context.tracker.feature
    assert feature.available, f"Feature {feature.uri} was not parsed"
    assert Attribute("component", "resolver") in feature.attributes, feature.attributes


@given(r'the background step is reported with prefix "(?P<prefix>[^"]+)"')
def step_background_prefix(context, prefix):
    text = _last_step_text(context)
    assert text.startswith(prefix), f"Expected '{prefix}' prefix in: {text}"


@then(r'the reported scenario name is "(?P<name>[^"]+)"')
def step_scenario_name(context, name):
    reported = context.tracker.last("scenario").name
    assert reported == name, f"{reported!r} != {name!r}"


@then(r'the reported scenario name starts with "(?P<name>[^"]+)"')
def step_scenario_name_prefix(context, name):
    reported = context.tracker.last("scenario").name
    assert reported.startswith(name), f"{reported!r} does not start with {name!r}"


@then(r"the reported step is not prefixed")
def step_not_prefixed(context):
    text = _last_step_text(context)
    assert not text.upper().startswith("BACKGROUND"), text


@then(r"the iteration suffix names the example row line")
def step_iteration_suffix(context):
    scenario = context.tracker.scenario
    assert scenario.iteration == f" [{scenario.line}]", scenario.iteration


@then(r'the scenario carries the tag attribute "(?P<value>[^"]+)"')
def step_scenario_attribute(context, value):
    attributes = context.tracker.scenario.attributes
    assert Attribute(None, value) in attributes, attributes
