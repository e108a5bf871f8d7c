# This file holds the static catalog and contact records published on the marketing site.
# It exists so the stores are seeded from one reviewed source instead of literals scattered across routers.
# Values are plain data; the store modules turn them into frozen models at startup.

from __future__ import annotations

from typing import Any, Final

SERVICE_ROWS: Final[tuple[dict[str, Any], ...]] = (
    {
        "id": 1,
        "title": "AI Strategy Consulting",
        "description": (
            "Strategic roadmaps for AI adoption and digital transformation tailored to your "
            "industry and business goals."
        ),
        "icon": "🎯",
        "features": (
            "AI Readiness Assessment",
            "Technology Roadmapping",
            "ROI Analysis",
            "Risk Assessment",
        ),
        "price": "Starting at $15,000",
    },
    {
        "id": 2,
        "title": "Machine Learning Development",
        "description": (
            "Custom ML models and algorithms designed specifically for your unique use cases "
            "and data requirements."
        ),
        "icon": "🤖",
        "features": (
            "Custom Model Development",
            "Data Pipeline Design",
            "Model Training & Optimization",
            "Performance Monitoring",
        ),
        "price": "Starting at $25,000",
    },
    {
        "id": 3,
        "title": "Process Automation",
        "description": (
            "Intelligent automation solutions that streamline operations and reduce manual "
            "workload across your organization."
        ),
        "icon": "⚡",
        "features": (
            "Process Analysis",
            "RPA Implementation",
            "Workflow Optimization",
            "Integration Support",
        ),
        "price": "Starting at $12,000",
    },
    {
        "id": 4,
        "title": "Computer Vision Solutions",
        "description": (
            "Advanced image and video analysis capabilities for quality control, security, "
            "and business intelligence."
        ),
        "icon": "👁️",
        "features": (
            "Object Detection",
            "Image Classification",
            "Video Analytics",
            "Real-time Processing",
        ),
        "price": "Starting at $30,000",
    },
    {
        "id": 5,
        "title": "Natural Language Processing",
        "description": (
            "Unlock insights from text data with sentiment analysis, document processing, "
            "and conversational AI solutions."
        ),
        "icon": "💬",
        "features": (
            "Sentiment Analysis",
            "Document Processing",
            "Chatbot Development",
            "Language Translation",
        ),
        "price": "Starting at $20,000",
    },
    {
        "id": 6,
        "title": "Predictive Analytics",
        "description": (
            "Forecast trends, customer behavior, and business outcomes using advanced "
            "statistical modeling and ML techniques."
        ),
        "icon": "📈",
        "features": (
            "Time Series Forecasting",
            "Customer Segmentation",
            "Demand Prediction",
            "Churn Analysis",
        ),
        "price": "Starting at $18,000",
    },
)

TEAM_ROWS: Final[tuple[dict[str, Any], ...]] = (
    {
        "id": 1,
        "name": "Dr. Sarah Chen",
        "role": "Chief AI Officer & Founder",
        "bio": (
            "PhD in Machine Learning from Stanford. 10+ years leading enterprise AI "
            "transformations at Fortune 500 companies."
        ),
        "initials": "SC",
        "expertise": ("Machine Learning", "AI Strategy", "Deep Learning"),
        "education": "PhD Computer Science, Stanford University",
        "experience": "Former AI Director at Google, Meta",
        "linkedin": "https://linkedin.com/in/sarahchen-ai",
    },
    {
        "id": 2,
        "name": "Michael Rodriguez",
        "role": "Lead Data Scientist",
        "bio": (
            "Expert in deep learning and computer vision with a track record of deploying "
            "ML models at scale."
        ),
        "initials": "MR",
        "expertise": ("Computer Vision", "Deep Learning", "MLOps"),
        "education": "MS Data Science, MIT",
        "experience": "8 years at Tesla, Amazon",
        "linkedin": "https://linkedin.com/in/mrodriguez-ml",
    },
    {
        "id": 3,
        "name": "Emily Johnson",
        "role": "AI Solutions Architect",
        "bio": (
            "Specializes in designing scalable AI infrastructure and cloud-native ML "
            "deployment strategies."
        ),
        "initials": "EJ",
        "expertise": ("Cloud Architecture", "MLOps", "System Design"),
        "education": "MS Computer Engineering, Berkeley",
        "experience": "6 years at AWS, Microsoft",
        "linkedin": "https://linkedin.com/in/emilyjohnson-ai",
    },
    {
        "id": 4,
        "name": "Dr. James Kim",
        "role": "Research Director",
        "bio": (
            "Leading researcher in reinforcement learning and autonomous systems with 50+ "
            "published papers."
        ),
        "initials": "JK",
        "expertise": ("Reinforcement Learning", "Robotics", "Research"),
        "education": "PhD Robotics, Carnegie Mellon",
        "experience": "Former Principal Scientist at OpenAI",
        "linkedin": "https://linkedin.com/in/jameskim-research",
    },
    {
        "id": 5,
        "name": "Lisa Wang",
        "role": "NLP Engineering Lead",
        "bio": (
            "Expert in natural language processing and conversational AI with focus on "
            "enterprise applications."
        ),
        "initials": "LW",
        "expertise": ("NLP", "Conversational AI", "Language Models"),
        "education": "MS Linguistics, Harvard",
        "experience": "5 years at Facebook AI Research",
        "linkedin": "https://linkedin.com/in/lisawang-nlp",
    },
    {
        "id": 6,
        "name": "Alex Thompson",
        "role": "AI Product Manager",
        "bio": (
            "Bridges the gap between AI research and business value, ensuring successful AI "
            "product adoption."
        ),
        "initials": "AT",
        "expertise": ("Product Strategy", "AI Ethics", "Business Development"),
        "education": "MBA Stanford, BS Computer Science",
        "experience": "Product Manager at Uber, Airbnb",
        "linkedin": "https://linkedin.com/in/alexthompson-ai",
    },
)

WEEKDAY_HOURS: Final[str] = "9:00 AM - 6:00 PM PST"

CONTACT_ROW: Final[dict[str, Any]] = {
    "company": "NeuraLink AI",
    "email": "contact@neuralink-ai.com",
    "phone": "+1 (555) 123-4567",
    "location": "San Francisco, CA",
    "address": {
        "street": "123 Innovation Drive, Suite 400",
        "city": "San Francisco",
        "state": "CA",
        "zipCode": "94105",
        "country": "United States",
    },
    "socialMedia": {
        "linkedin": "https://linkedin.com/company/neuralink-ai",
        "twitter": "https://twitter.com/neuralinklai",
        "github": "https://github.com/neuralink-ai",
    },
    "businessHours": {
        "monday": WEEKDAY_HOURS,
        "tuesday": WEEKDAY_HOURS,
        "wednesday": WEEKDAY_HOURS,
        "thursday": WEEKDAY_HOURS,
        "friday": WEEKDAY_HOURS,
        "saturday": "Closed",
        "sunday": "Closed",
    },
    "responseTime": "We typically respond within 24 hours",
}
