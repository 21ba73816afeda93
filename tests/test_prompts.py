"""Tests for prompt builders."""

import json

from pathpilot_api.prompts import (
    build_career_recommendations_prompt,
    build_careers_by_category_prompt,
    build_enrich_prompt,
    build_quiz_prompt,
    build_recommend_prompt,
    build_trending_prompt,
)


class TestTrendingPrompt:
    def test_default_count(self) -> None:
        assert build_trending_prompt().startswith("List 24 trending")

    def test_declares_career_schema(self) -> None:
        prompt = build_trending_prompt(3)
        assert "List 3 trending" in prompt
        for key in ("requiredSkills", "averageSalary", "growthPotential", "imageUrl"):
            assert key in prompt

    def test_deterministic(self) -> None:
        assert build_trending_prompt(7) == build_trending_prompt(7)


class TestRecommendPrompt:
    def test_embeds_preferences_as_json(self) -> None:
        prompt = build_recommend_prompt({"interests": ["art"]}, 4)
        assert json.dumps({"interests": ["art"]}) in prompt
        assert "recommend 4 diverse careers" in prompt

    def test_defaults(self) -> None:
        prompt = build_recommend_prompt()
        assert "Given preferences: {}" in prompt
        assert "recommend 12" in prompt


class TestEnrichPrompt:
    def test_embeds_titles(self) -> None:
        prompt = build_enrich_prompt(["Nurse", "Pilot"])
        assert '["Nurse", "Pilot"]' in prompt
        assert "salaryRange" in prompt

    def test_empty_titles(self) -> None:
        assert "For titles: []" in build_enrich_prompt()


class TestQuizPrompt:
    def test_default_question_count(self) -> None:
        prompt = build_quiz_prompt("quiz_1")
        assert prompt.startswith("Generate 5 unique questions.")

    def test_zero_questions(self) -> None:
        assert build_quiz_prompt("quiz_1", num_questions=0).startswith("Generate 0 unique questions")

    def test_optional_parts(self) -> None:
        prompt = build_quiz_prompt(
            "quiz_9",
            topic="Healthcare",
            subcategory="Nursing",
            difficulty="hard",
            question_style="Scenario",
            num_questions=3,
        )
        assert prompt.startswith(
            'Generate 3 unique questions about "Healthcare" in the subcategory "Nursing" at a hard level.'
            " Use the Scenario style."
        )
        assert '"id": "quiz_9"' in prompt

    def test_implicit_defaults_add_nothing(self) -> None:
        prompt = build_quiz_prompt("quiz_1", subcategory="General", question_style="Multiple Choice")
        assert "subcategory" not in prompt.split("\n")[0]
        assert "style." not in prompt.split("\n")[0]

    def test_declares_quiz_schema(self) -> None:
        prompt = build_quiz_prompt("quiz_1")
        for key in ("correctAnswerId", "explanation", "points", "options"):
            assert key in prompt
        assert "Randomize the content." in prompt

    def test_deterministic(self) -> None:
        assert build_quiz_prompt("quiz_1", topic="x") == build_quiz_prompt("quiz_1", topic="x")


class TestCareersByCategoryPrompt:
    def test_defaults(self) -> None:
        assert build_careers_by_category_prompt("Design").startswith(
            'List 15 diverse careers in the "Design" category.'
        )

    def test_missing_category(self) -> None:
        assert 'in the "" category' in build_careers_by_category_prompt(None, 2)


class TestCareerRecommendationsPrompt:
    def test_embeds_answers(self) -> None:
        answers = [{"questionId": "q1", "answerId": "b"}]
        prompt = build_career_recommendations_prompt(answers, 5)
        assert json.dumps(answers) in prompt
        assert "Recommend 5 careers." in prompt
        assert '"recommendations"' in prompt

    def test_defaults(self) -> None:
        prompt = build_career_recommendations_prompt()
        assert "quiz answers: []" in prompt
        assert "Recommend 3 careers." in prompt
