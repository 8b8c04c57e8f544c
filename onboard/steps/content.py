"""
Static checklist copy

One ``StepContent`` row per registry step. The runner reads these rows;
no step has its own control flow. Reference texts (architecture
walkthrough, Jenkins pipelines, FAQ, help) live here as well.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StepContent:
    """
    What a step says and asks.

    Flow: heading, intro, then ``question``. A positive answer prints
    ``confirmed`` (or ``skipped``) and ``on_complete``. A negative answer
    prints ``guidance`` and, when set, asks ``follow_up`` as a second
    chance. A step with no ``question`` goes straight to guidance and
    ``follow_up``.
    """

    step_id: str
    heading: str
    question: str | None = None
    yes_tokens: tuple[str, ...] = ("y",)
    no_tokens: tuple[str, ...] = ("n",)
    allow_skip: bool = False
    intro: tuple[str, ...] = ()
    confirmed: str = ""
    skipped: str = ""
    guidance: tuple[str, ...] = ()
    follow_up: str | None = None
    on_complete: tuple[str, ...] = ()
    halt_message: str = "Progress saved. Run this tool again to continue!"


SERVICE_DESK = "1. Contact your buddy or manager for the Service Desk portal URL"

JENKINS_PIPELINES: tuple[str, ...] = (
    "PDP Mobile Web (preprod beauty)",
    "Desktop Web Reloaded (preprod beauty)",
    "Feature Forge (preprod beauty)",
    "Feature Forge (preprod man)",
    "Stride (SNS)",
    "Rapid Aura (QC)",
)

REPOSITORIES: tuple[tuple[str, str], ...] = (
    ("nykaa-web-reloaded", "Mobile web application"),
    ("nykaa-dweb-reloaded", "Desktop web application"),
    ("fe-core", "Shared frontend components"),
    ("remote-config", "Feature flags & configurations"),
    ("feature-forge", "Next.js pages"),
    ("stride", "CHANEL brand"),
    ("rapid-aura", "Nykaa Quick Commerce (Nykaa Now)"),
)


def jenkins_pipelines_text() -> str:
    lines = ["", "Key Jenkins Pipelines:", ""]
    lines += [f"   {i}. {name}" for i, name in enumerate(JENKINS_PIPELINES, start=1)]
    lines += ["", "Contact your buddy or check internal documentation for Jenkins URLs", ""]
    return "\n".join(lines)


ARCHITECTURE_WALKTHROUGH = """
ARCHITECTURE WALKTHROUGH - CORE DISCOVERY FRONTEND

This walkthrough helps you understand what we own and where things live

------------------------------------------------------------

HIGH LEVEL USER FLOW

User opens the app
  |
Home / Search / Category / PLP
  |
Product Detail Page (PDP / Hybrid PDP)
  |
Cart
  |
Order Creation (handoff to checkout)

Core Discovery Frontend owns everything up to Cart including Auth flows, Account page.

------------------------------------------------------------

REPOSITORIES OWNED BY THE TEAM

1. nykaa-web-reloaded
   - Main frontend repository for Mobile Web
   - Primary discovery surface for users
   - Pages owned: Home, Search Listing, Category Listing, PLP,
     PDP / Hybrid PDP, Cart, Account & Auth flows
   - You will work in this repo most frequently

2. nykaa-dweb-reloaded
   - Frontend repository for Desktop Web
   - Similar business logic as mobile but different UX patterns
   - Used for parity fixes and desktop-only features

3. fe-core
   - Monorepo for shared frontend foundations
   - Shared UI components, design system primitives, common hooks and utilities
   - Changes here impact multiple products

4. remote-config
   - Configuration-driven feature control system
   - Feature flags, feature configurations, A/B experiments, kill switches
   - Directly affects production behaviour. Handle with care

5. feature-forge
   - Next.js based frontend repository
   - Pages that are being migrated to Next.js

6. stride
   - Brand specific frontend application (CHANEL)
   - You will touch this only for brand specific work

7. rapid-aura
   - Frontend for Quick Commerce (Nykaa Now)

8. Mosaic
   - Source of truth for the LUMI Design System
   - Design tokens (colors, spacing, typography, borders) and themes
   - No business logic lives here. Changes have a global impact on UI consistency

9. Essence
   - Monorepo for UI components built on the LUMI Design System
   - Similar role to fe-core, but modernized and design-token driven
   - Think of Essence as: "Reusable components powered by Mosaic tokens"

------------------------------------------------------------

ENVIRONMENT CONFIGURATION

- Environment configs are sourced from nykaa_fe_configs
- Typically copied once during setup
- Used to configure API endpoints and environment specific behaviour

------------------------------------------------------------"""

ARCHITECTURE_NEXT_STEPS = """
WHAT TO DO NEXT

1. Identify your primary repository
2. Explore routing and API integration
3. Pick one page (HLP / PLP / PDP) and trace: API -> UI flow

Tip: Understanding the discovery funnel early
will make debugging and feature development easier.
"""

FAQS = """
=============================================================

Frequently Asked Questions

Coming soon! FAQs will be added here.

   - How to request access to tools?
   - What if I encounter issues during setup?
   - Who should I contact for help?

=============================================================
"""


def help_text(command: str, progress_path: str) -> str:
    commands = [
        ("", "Start or continue your onboarding journey"),
        (" progress", "View your current onboarding progress"),
        (" arch-walkthrough", "View architecture walkthrough only"),
        (" faqs", "View frequently asked questions"),
        (" getJenkinsPipelines", "View list of Jenkins pipelines"),
        (" reset", "Reset all progress and start over"),
        (" help", "Show this help message"),
    ]
    lines = ["", "=" * 61, "", "Onboarding Tool - Help", "", "Available Commands:", ""]
    for suffix, description in commands:
        lines.append(f"  {command}{suffix}")
        lines.append(f"    {description}")
        lines.append("")
    lines += [
        "Tips:",
        "",
        "  - Your progress is automatically saved after each step",
        "  - You can exit anytime and resume later",
        "  - Optional steps can be skipped by typing 'skip'",
        "",
        "Progress File Location:",
        "",
        f"  {progress_path}",
        "",
        "=" * 61,
        "",
    ]
    return "\n".join(lines)


STEP_CONTENT: dict[str, StepContent] = {
    "jira": StepContent(
        step_id="jira",
        heading="JIRA Access Check",
        question="Do you have JIRA access? (y/n): ",
        confirmed="Awesome! JIRA access confirmed.",
        guidance=(
            "No worries! Let's get you set up.",
            "",
            "Here's what you need to do:",
            "",
            SERVICE_DESK,
            "2. Raise an IT Service Request for 'JIRA Access'",
            "",
            "Request details:",
            "  - Access Requested For: New Access",
            "  - Category: Application Access",
            "  - Sub Category: jira",
            "",
            "Once you have access, just re-run this tool!",
        ),
        halt_message="Progress saved. Run this tool again once you have JIRA access!",
    ),
    "copilot": StepContent(
        step_id="copilot",
        heading="GitHub Copilot Access Check (optional)",
        question="Do you have GitHub Copilot access? (y/n/skip): ",
        allow_skip=True,
        confirmed="Perfect! GitHub Copilot is ready to assist you.",
        skipped="Skipping GitHub Copilot for now.",
        guidance=(
            "Let's get you AI-powered coding assistance!",
            "",
            "Here's what you need to do:",
            "",
            SERVICE_DESK,
            "2. Raise an IT Service Request for 'GitHub Copilot Access'",
            "",
            "Request details:",
            "  - Co-pilot Request Type: Owner",
            "",
            "Once approved, re-run this tool to continue!",
        ),
    ),
    "vpn": StepContent(
        step_id="vpn",
        heading="VPN Access Check",
        question="Do you have access to the VPN? (y/n): ",
        confirmed="Great! You're connected to our secure network.",
        guidance=(
            "VPN access is essential for accessing internal resources.",
            "",
            "Here's what you need to do:",
            "",
            SERVICE_DESK,
            "2. Raise an IT Service Request for 'VPN Creation and Access'",
            "",
            "Request details:",
            "  - VPN Request Category: VPN",
            "  - VPN Sub Category: Prod & Pre-Prod",
            "",
            "Once you have VPN access, re-run this tool!",
        ),
        halt_message="Progress saved. Run this tool again once you have VPN access!",
    ),
    "repos": StepContent(
        step_id="repos",
        heading="GitHub Repositories Access Check",
        question=(
            "Do you have access to all the repos you'll be working on?\n\n"
            "   1. I have access to all the repos\n"
            "   2. I don't have access to all/some repos\n\n"
            "   Enter your choice (1 or 2): "
        ),
        yes_tokens=("1",),
        no_tokens=("2",),
        confirmed="Excellent! You're all set with repository access.",
        guidance=(
            "Let's get you access to our core repositories!",
            "",
            "Here are the repositories you need access to:",
            "",
            *(
                f"   {i}. {name:<22} -> {purpose}"
                for i, (name, purpose) in enumerate(REPOSITORIES, start=1)
            ),
            "",
            "Request access from your manager, then re-run this tool!",
        ),
        halt_message="Progress saved. Run this tool again once you have repository access!",
    ),
    "gtm": StepContent(
        step_id="gtm",
        heading="Google Tag Manager Access Check",
        question="Do you have access to GTM containers? (y/n): ",
        confirmed="Perfect! You can now manage tracking tags.",
        guidance=(
            "GTM helps us manage tracking & analytics scripts efficiently.",
            "",
            "Here's what you need to do:",
            "",
            SERVICE_DESK,
            "2. Raise an IT Service Request for 'Google Tag Manager'",
            "",
            "Request details:",
            "  - GTM Access Requested For: New Access",
            "  - Container Field: Need access to all",
            "  - User Access Type: User",
            "  - Role Type: Edit",
            "",
            "Once you have access to all GTM containers, re-run this tool!",
        ),
        halt_message="Progress saved. Run this tool again once you have GTM access!",
    ),
    "monitoring": StepContent(
        step_id="monitoring",
        heading="Monitoring Tools Access Check",
        question="Do you have access to New Relic, Kibana, and Grafana? (y/n): ",
        confirmed="Awesome! You're all set with monitoring tools.",
        guidance=(
            "These tools help you monitor logs, metrics, and visualize data.",
            "",
            "Here are your access details:",
            "",
            "1. Kibana",
            "   Contact your buddy to get the URL and credentials",
            "   Requires VPN connection",
            "",
            "2. Grafana",
            "   Contact your buddy to get the Grafana URL",
            "   Auth: Sign in with your company Google Account",
            "",
            "3. New Relic",
            "   Contact your buddy to get the account details and credentials",
        ),
        follow_up="Once you've accessed all monitoring tools, type 'y' to proceed: ",
    ),
    "figma": StepContent(
        step_id="figma",
        heading="Figma Access",
        guidance=(
            "Figma is where all our designs live.",
            "",
            "Access:",
            "   URL: https://www.figma.com",
            "   Contact your buddy to get the shared account credentials",
        ),
        follow_up="Once you've accessed Figma, type 'y' to proceed: ",
    ),
    "local": StepContent(
        step_id="local",
        heading="Running the Application Locally",
        guidance=(
            "Time to get the app running on your machine!",
            "",
            "Quick Start Steps:",
            "",
            "   1. Clone the repository from GitHub",
            "   2. Navigate to the project directory",
            "   3. Install dependencies (npm or yarn)",
            "   4. Start the development server",
            "",
            "Tip: Check the README.md file in the repo for detailed instructions!",
        ),
        follow_up="Once you have the app running locally, type 'y' to proceed: ",
    ),
    "architecture": StepContent(
        step_id="architecture",
        heading="Architecture Walkthrough",
        intro=("Ready to explore how everything fits together?",),
        question="Enter 'y' to proceed with the architecture walkthrough: ",
        on_complete=(ARCHITECTURE_WALKTHROUGH, ARCHITECTURE_NEXT_STEPS),
    ),
    "jenkins": StepContent(
        step_id="jenkins",
        heading="Jenkins Access Check (optional)",
        question="Do you have access to Jenkins pipelines? (y/n/skip): ",
        allow_skip=True,
        confirmed="Perfect! You can now deploy and monitor builds.",
        skipped="Skipping Jenkins access for now. You can set this up later.",
        guidance=(
            "Jenkins access is needed for deployments and CI/CD.",
            "",
            "Here's what you need to do:",
            "",
            "   1. Contact your buddy or manager for Jenkins access request process",
            "   2. Typically requires raising a JIRA ticket in the DevOps/DA board",
            "",
            "Pipelines you'll need access to:",
            jenkins_pipelines_text(),
            "Once you have Jenkins access, re-run this tool!",
        ),
        halt_message="Progress saved. Run this tool again once you have Jenkins access!",
    ),
}
