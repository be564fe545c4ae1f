import pytest

from testsuites.ui_testing.framework.smart_locator import ElementNotFoundError
from testsuites.ui_testing.framework.value_strategies import (
    RANGE_INPUT_SELECTOR,
    FunctionStrategy,
    StrategyChain,
)
from testsuites.ui_testing.pages.slider_page import SliderOutOfRangeError, SliderPage
from testsuites.unit.fake_page import FakeElement, FakePage


def slider_page_with(count, settings, on_fill=None):
    """Page with `count` sliders, each mirrored into its own <output>."""
    page = FakePage()
    for _ in range(count):
        output, = page.add("output", FakeElement(text="15"))
        page.add(RANGE_INPUT_SELECTOR, FakeElement(value="15", on_fill=on_fill, mirror=output))
    return page, SliderPage(page, settings)


@pytest.mark.asyncio
async def test_navigate_follows_link_and_settles(settings):
    page = FakePage()
    sliders = SliderPage(page, settings)

    assert not sliders.navigated
    await sliders.navigate()

    assert sliders.navigated
    assert page.navigation[0] == ("goto", "https://www.lambdatest.com/selenium-playground/")
    assert page.navigation[1] == ("load_state", "domcontentloaded")
    assert page.navigation[2] == ("click", 'a:text("Drag & Drop Sliders")')
    kind, pattern = page.navigation[3]
    assert kind == "wait_for_url"
    assert pattern.search(settings.url_for("sliders"))
    assert page.delays == [settings.timeouts.page_load_settle_ms]


@pytest.mark.asyncio
async def test_set_value_within_tolerance_logs_no_warning(settings, log_records):
    page, sliders = slider_page_with(3, settings)

    await sliders.set_slider_value(1, 50)

    assert page.elements[RANGE_INPUT_SELECTOR][1].value == "50"
    assert page.waited == [(RANGE_INPUT_SELECTOR, settings.timeouts.slider_ready_ms)]
    assert page.delays == [settings.timeouts.slider_settle_ms]
    assert not [msg for level, msg in log_records if level == "WARNING"]


@pytest.mark.asyncio
async def test_snapped_value_within_tolerance_is_accepted(settings, log_records):
    page, sliders = slider_page_with(1, settings, on_fill=lambda v: str(int(v) - 2))

    await sliders.set_slider_value(0, 50)

    assert page.elements[RANGE_INPUT_SELECTOR][0].value == "48"
    assert not [msg for level, msg in log_records if level == "WARNING"]


@pytest.mark.asyncio
async def test_mismatch_beyond_tolerance_only_warns(settings, log_records):
    page, sliders = slider_page_with(1, settings, on_fill=lambda v: "40")

    await sliders.set_slider_value(0, 50)

    warnings = [msg for level, msg in log_records if level == "WARNING"]
    assert len(warnings) == 1
    assert "40" in warnings[0] and "50" in warnings[0]


@pytest.mark.asyncio
async def test_non_numeric_read_back_only_warns(settings, log_records):
    page, sliders = slider_page_with(1, settings, on_fill=lambda v: "")

    await sliders.set_slider_value(0, 50)

    assert any("non-numeric" in msg for level, msg in log_records if level == "WARNING")


@pytest.mark.asyncio
@pytest.mark.parametrize("index", [3, 7, -1])
async def test_out_of_range_index_raises_before_mutating(settings, index):
    page, sliders = slider_page_with(3, settings)

    with pytest.raises(SliderOutOfRangeError, match="Found 3 sliders"):
        await sliders.set_slider_value(index, 50)

    assert page.mutations == []
    assert page.delays == []


def test_out_of_range_is_an_index_error():
    assert issubclass(SliderOutOfRangeError, IndexError)


@pytest.mark.asyncio
async def test_missing_sliders_fail_hard(settings):
    page = FakePage()

    with pytest.raises(ElementNotFoundError):
        await SliderPage(page, settings).set_slider_value(0, 50)

    assert page.mutations == []


@pytest.mark.asyncio
async def test_round_trip_reads_value_back(settings):
    page, sliders = slider_page_with(8, settings)

    await sliders.set_slider_value(4, 50)
    value = await sliders.read_slider_value(4)

    assert abs(int(value) - 50) <= 2
    assert await sliders.read_slider_value(3) == "15"


@pytest.mark.asyncio
async def test_injected_strategy_chain_is_used(settings):
    seen = []

    async def fixed(page, index):
        seen.append(index)
        return "77"

    sliders = SliderPage(FakePage(), settings, strategies=StrategyChain([FunctionStrategy(fixed)]))

    assert await sliders.read_slider_value(2) == "77"
    assert seen == [2]


@pytest.mark.asyncio
async def test_read_returns_none_without_any_widget(settings):
    assert await SliderPage(FakePage(), settings).read_slider_value(0) is None


@pytest.mark.asyncio
async def test_clamped_target_only_warns(settings, log_records):
    # The browser keeps 100 and Playwright reports the fill as malformed
    page, sliders = slider_page_with(1, settings, on_fill=lambda v: str(min(int(v), 100)))

    await sliders.set_slider_value(0, 150)

    assert page.elements[RANGE_INPUT_SELECTOR][0].value == "100"
    assert page.delays == [settings.timeouts.slider_settle_ms]
    warnings = [msg for level, msg in log_records if level == "WARNING"]
    assert len(warnings) == 1
    assert "100" in warnings[0] and "150" in warnings[0]


@pytest.mark.asyncio
async def test_other_fill_failures_propagate(settings):
    page = FakePage()
    page.add(RANGE_INPUT_SELECTOR, FakeElement(value="15", fail_on={"fill"}))

    with pytest.raises(RuntimeError, match="not interactable"):
        await SliderPage(page, settings).set_slider_value(0, 50)


@pytest.mark.asyncio
async def test_negative_index_reads_none(settings):
    page = FakePage()
    for text in ("15", "95"):
        output, = page.add("output", FakeElement(text=text))
        page.add(RANGE_INPUT_SELECTOR, FakeElement(value=text, attributes={"value": text}, mirror=output))
    sliders = SliderPage(page, settings)

    assert await sliders.read_slider_value(1) == "95"
    assert await sliders.read_slider_value(-1) is None
