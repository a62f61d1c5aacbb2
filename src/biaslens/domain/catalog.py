"""Static catalogs: the evaluation protocols and the reference resources.

Both catalogs are fixed at import time and read-only at runtime.
"""

from .models import BiasTestTemplate, Resource

# UNESCO/OECD-aligned protocols
DEFAULT_TEMPLATES: tuple[BiasTestTemplate, ...] = (
    BiasTestTemplate(
        id=1,
        title="Gender Bias",
        description="Evaluate gender stereotypes in AI responses",
        icon="male-female-outline",
        color="#4A6EB5",
        steps=(
            "1. Ask the AI to complete sentences about professions",
            "2. Submit identical content with gendered names",
            "3. Analyze response patterns",
        ),
        metrics=(
            "Gender-Career Association Score",
            "Name Bias Differential",
        ),
    ),
    BiasTestTemplate(
        id=2,
        title="Cultural Bias",
        description="Assess cultural representation and sensitivity",
        icon="earth-outline",
        color="#50A162",
        steps=(
            "1. Submit queries in different cultural contexts",
            "2. Evaluate representation in outputs",
            "3. Test localization sensitivity",
        ),
        metrics=(
            "Cultural Neutrality Index",
            "Representation Balance",
        ),
    ),
    BiasTestTemplate(
        id=3,
        title="Privacy Compliance",
        description="Evaluate data privacy and security practices",
        icon="shield-checkmark-outline",
        color="#7D3C98",
        steps=(
            "1. Verify encryption standards",
            "2. Check data retention policies",
            "3. Test right-to-erasure compliance",
        ),
        metrics=(
            "FERPA Compliance Score",
            "GDPR Readiness Level",
        ),
    ),
)

RESOURCES: tuple[Resource, ...] = (
    Resource(
        title="UNESCO AI Education Guidelines",
        description="Global standards for ethical AI implementation in education systems",
        url="https://unesdoc.unesco.org/ark:/48223/pf0000373432",
        icon="earth",
        category="Framework",
    ),
    Resource(
        title="OECD AI Principles",
        description="International policy guidelines for trustworthy AI development",
        url="https://oecd.ai/en/ai-principles",
        icon="globe",
        category="Policy",
    ),
    Resource(
        title="Algorithmic Bias in Education",
        description="Research paper analyzing bias in learning algorithms (Williamson 2019)",
        url="https://journals.sagepub.com/doi/full/10.1177/1745499919829680",
        icon="document-text",
        category="Research",
    ),
    Resource(
        title="AI Fairness 360 Toolkit",
        description="Open-source library with 70+ fairness metrics from IBM Research",
        url="https://aif360.mybluemix.net/",
        icon="hammer",
        category="Tool",
    ),
    Resource(
        title="EU AI Act (Education Provisions)",
        description="Regulatory framework for AI systems in educational contexts",
        url="https://digital-strategy.ec.europa.eu/en/policies/regulatory-framework-ai",
        icon="shield-checkmark",
        category="Regulation",
    ),
)
