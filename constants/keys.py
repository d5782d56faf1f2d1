class UIKeys:
    """Keys for UI widgets in ``st.session_state``."""

    FLOW_SELECT = "ui.flow_select"
    TOKEN_INPUT = "ui.auth.token_input"
    RESUME_UPLOADER = "ui.profile.resume_uploader"
    SKILL_INPUT = "ui.skill_input"
    JOB_AI_COMPANY = "ui.job_posting.ai_company"


class StateKeys:
    """Keys for data stored in ``st.session_state``."""

    ACCESS_TOKEN = "auth.access_token"
    USER = "auth.user"
    ACTIVE_FLOW = "wizard.active_flow"
    FLASH = "wizard.flash"
