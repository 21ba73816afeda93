"""Static payloads served when the model API is out of quota.

Every entry mirrors the JSON shape the matching prompt asks the model for, so
callers cannot tell a fallback reply from a live one by structure alone.
"""

from pathpilot_api.models import Career, QuizOption, QuizQuestion, Recommendation


def _career(
    id: str,
    title: str,
    description: str,
    category: str,
    required: list[str],
    recommended: list[str],
    salary: int,
    growth: str,
    companies: list[str],
    courses: list[str],
) -> Career:
    return Career(
        id=id,
        title=title,
        description=description,
        category=category,
        required_skills=required,
        recommended_skills=recommended,
        average_salary=salary,
        growth_potential=growth,
        companies=companies,
        courses=courses,
        image_url="",
    )


TRENDING_CAREERS: tuple[Career, ...] = (
    _career("ai_engineer", "AI Engineer", "Build and deploy AI/ML systems for products.",
            "Technology", ["python", "ml"], ["LLMs"], 125000, "High", ["OpenAI"], ["DL Spec"]),
    _career("data_scientist", "Data Scientist", "Analyze data and build predictive models.",
            "Data Science", ["python", "statistics"], ["sql"], 110000, "High", ["Netflix"], ["Intro to ML"]),
    _career("ux_designer", "UX Designer", "Design intuitive user experiences.",
            "Design", ["research", "wireframing"], ["prototyping"], 90000, "Medium", ["Figma"], ["UX Foundations"]),
    _career("product_manager", "Product Manager", "Drive product vision and execution.",
            "Business", ["communication"], ["analytics"], 120000, "High", ["Google"], ["PM Fundamentals"]),
    _career("nurse_practitioner", "Nurse Practitioner", "Provide healthcare services.",
            "Healthcare", ["patient care"], ["informatics"], 105000, "High", ["Hospitals"], ["Clinical"]),
    _career("financial_analyst", "Financial Analyst", "Analyze financial data.",
            "Finance", ["excel", "modeling"], ["sql"], 90000, "Medium", ["Banks"], ["Finance"]),
    _career("teacher", "Teacher", "Educate students.",
            "Education", ["instruction"], ["assessment"], 65000, "Medium", ["Schools"], ["Education"]),
    _career("digital_marketer", "Digital Marketer", "Run campaigns and grow brand reach.",
            "Marketing", ["seo", "content"], ["analytics"], 80000, "Medium", ["Agencies"], ["Marketing"]),
    _career("civil_engineer", "Civil Engineer", "Design infrastructure.",
            "Engineering", ["cad"], ["materials"], 98000, "Medium", ["AEC"], ["Civil"]),
    _career("graphic_designer", "Graphic Designer", "Create visual concepts.",
            "Arts", ["photoshop"], ["illustration"], 70000, "Low", ["Studios"], ["Design"]),
)


def _question(id: str, question: str, options: list[str], correct: str, explanation: str) -> QuizQuestion:
    # Options are lettered a, b, c, d in order
    return QuizQuestion(
        id=id,
        question=question,
        options=[QuizOption(id=letter, text=text) for letter, text in zip("abcd", options)],
        correct_answer_id=correct,
        explanation=explanation,
        points=2,
    )


QUIZ_TITLE = "Personality Assessment Quiz"
QUIZ_DESCRIPTION = "A comprehensive quiz to assess your personality traits and preferences"

QUIZ_QUESTIONS: tuple[QuizQuestion, ...] = (
    _question("q1", "How do you prefer to work?",
              ["Independently", "In a team", "With guidance", "Leading others"],
              "b", "This helps assess your working style preference."),
    _question("q2", "What motivates you most?",
              ["Recognition", "Learning new things", "Helping others", "Financial rewards"],
              "b", "This reveals your primary motivation drivers."),
    _question("q3", "How do you handle stress?",
              ["Take breaks and relax", "Work harder to solve it", "Ask for help", "Ignore it and move on"],
              "a", "This shows your stress management approach."),
    _question("q4", "What type of environment do you prefer?",
              ["Quiet and focused", "Dynamic and fast-paced", "Collaborative and social", "Creative and flexible"],
              "c", "This indicates your ideal work environment."),
    _question("q5", "How do you make decisions?",
              ["Quickly and intuitively", "After careful analysis", "With input from others", "Based on past experience"],
              "b", "This reveals your decision-making style."),
    _question("q6", "What do you value most in a career?",
              ["Job security", "Growth opportunities", "Work-life balance", "Making a difference"],
              "d", "This shows your career priorities."),
    _question("q7", "How do you prefer to learn?",
              ["Through hands-on practice", "By reading and studying", "Through discussion and debate",
               "By watching demonstrations"],
              "a", "This indicates your learning style preference."),
    _question("q8", "What type of problems do you enjoy solving?",
              ["Technical and logical", "Creative and artistic", "People and relationship issues",
               "Strategic and planning problems"],
              "a", "This reveals your problem-solving preferences."),
    _question("q9", "How do you handle feedback?",
              ["Welcome it and use it to improve", "Consider it carefully", "Feel defensive initially",
               "Ignore negative feedback"],
              "a", "This shows your openness to growth and improvement."),
    _question("q10", "What energizes you most?",
              ["Meeting new people", "Completing challenging tasks", "Learning something new",
               "Helping others succeed"],
              "c", "This indicates what drives your motivation."),
    _question("q11", "How do you prefer to communicate?",
              ["Face-to-face conversations", "Written messages and emails", "Phone calls and video chats",
               "Presentations and public speaking"],
              "a", "This shows your communication style preference."),
    _question("q12", "What role do you typically take in groups?",
              ["Leader and organizer", "Contributor and supporter", "Observer and analyzer",
               "Mediator and peacemaker"],
              "b", "This reveals your natural group dynamics role."),
)

RECOMMENDATIONS: tuple[Recommendation, ...] = (
    Recommendation(career="Software Engineer",
                   explanation="Based on your technical skills and problem-solving abilities."),
    Recommendation(career="Data Analyst",
                   explanation="Your analytical thinking makes you well-suited for data analysis."),
    Recommendation(career="Project Manager",
                   explanation="Your organizational and communication skills are perfect for project management."),
)
