"""
Tests for the typing script generator.
"""

from dataclasses import replace

from engine.step_generator import format_social, generate_steps
from engine.timeline import total_duration
from models.config import AnimationConfig, Social
from models.enums import SocialType
from models.steps import DeleteStep, PauseStep, TypeStep


class TestFormatSocial:

    def test_prefix_types(self):
        assert format_social(Social(SocialType.X, "abc")) == "x.com/abc"
        assert format_social(Social(SocialType.YOUTUBE, "abc")) == "youtube.com/@abc"
        assert format_social(Social(SocialType.GITHUB, "abc")) == "github.com/abc"

    def test_suffix_types(self):
        assert format_social(Social(SocialType.SNS, "abc")) == "abc.sol"
        assert format_social(Social(SocialType.ENS, "abc")) == "abc.eth"


class TestGenerateSteps:

    def test_intro_only(self):
        """Intro with nothing else: type then the long hold"""
        config = AnimationConfig(intro_text="Hi", speed=50, pause=2000)
        steps = generate_steps(config)

        assert steps == [TypeStep("Hi"), PauseStep(4000)]
        assert total_duration(steps, 50) == 2 * 50 + 2 * 2000

    def test_single_social_without_name_or_role(self):
        config = AnimationConfig(
            intro_text="Hey there! I am",
            socials=(Social(SocialType.X, "abc", True),),
            pause=2000,
        )

        assert generate_steps(config) == [
            TypeStep("Hey there! I am"),
            TypeStep(" x.com/abc"),
            PauseStep(2000),
            PauseStep(4000),
        ]

    def test_full_script(self, full_config):
        steps = generate_steps(full_config)

        assert steps == [
            TypeStep("Hey there! I am"),
            TypeStep(" Niraj"),
            PauseStep(1000),
            DeleteStep(len(" Niraj")),
            TypeStep(" Dev"),
            PauseStep(1000),
            DeleteStep(len(" Dev")),
            TypeStep(" x.com/abc"),
            PauseStep(1000),
            DeleteStep(len(" x.com/abc")),
            TypeStep(" github.com/abc"),
            PauseStep(1000),
            PauseStep(2000),
        ]

    def test_deterministic(self, full_config):
        assert generate_steps(full_config) == generate_steps(full_config)

    def test_empty_handle_contributes_nothing(self):
        config = AnimationConfig(intro_text="Hi", socials=(Social(SocialType.X, "", True),))
        steps = generate_steps(config)

        assert all("x.com/" not in getattr(s, "text", "") for s in steps)
        assert steps == generate_steps(replace(config, socials=()))

    def test_disabled_social_keeps_tracked_suffix(self):
        """A skipped social must not consume the pending delete"""
        config = AnimationConfig(
            intro_text="I am",
            role="Dev",
            socials=(
                Social(SocialType.X, "abc", enabled=False),
                Social(SocialType.ENS, "abc"),
            ),
            pause=10,
        )

        assert generate_steps(config) == [
            TypeStep("I am"),
            TypeStep(" Dev"),
            PauseStep(10),
            DeleteStep(4),
            TypeStep(" abc.eth"),
            PauseStep(10),
            PauseStep(20),
        ]

    def test_empty_name_has_no_dangling_delete(self):
        config = AnimationConfig(intro_text="I am", role="Dev", pause=10)
        steps = generate_steps(config)

        assert not any(isinstance(s, DeleteStep) for s in steps)

    def test_empty_intro_still_produces_steps(self):
        steps = generate_steps(AnimationConfig(intro_text="", pause=10))

        assert steps[0] == TypeStep("")
        assert steps[-1] == PauseStep(20)
