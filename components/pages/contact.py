"""
Contact section: a short message form and the network's contact details.

Submissions are validated and logged; no message is delivered anywhere.
"""

import logging
from enum import Enum
from typing import Dict, Optional

import streamlit as st
from pydantic import BaseModel, EmailStr, Field, ValidationError

from components.cms.models import SiteConfigRecord
from utils.icons import get_icon, render_icon_text

from .metadata import contact_metadata
from .view import PageView

logger = logging.getLogger(__name__)


class ContactMessage(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    message: str = Field(min_length=1, max_length=5000)


class SubmitStatus(Enum):
    IDLE = "idle"
    SUCCESS = "success"
    ERROR = "error"


def submit_contact_form(form_data: Dict[str, str]) -> SubmitStatus:
    """
    Validate and accept a contact form submission.

    Returns:
        SUCCESS for a valid message, ERROR otherwise
    """
    try:
        message = ContactMessage(**{k: (v or "").strip() for k, v in form_data.items()})
    except ValidationError as e:
        logger.info(f"Rejected contact form submission: {e.error_count()} invalid field(s)")
        return SubmitStatus.ERROR

    logger.info(f"Contact form submitted by {message.name} <{message.email}>")
    return SubmitStatus.SUCCESS


def render_contact_details(site_settings: Optional[SiteConfigRecord]) -> None:
    st.markdown("#### Contact Information")
    if site_settings is not None and site_settings.contact_email:
        render_icon_text(get_icon('email'), site_settings.contact_email,
                         href=f"mailto:{site_settings.contact_email}")
    if site_settings is not None and site_settings.contact_phone:
        render_icon_text(get_icon('phone'), site_settings.contact_phone,
                         href=f"tel:{site_settings.contact_phone}")
    render_icon_text(get_icon('address'), "Brussels, Belgium")


def render_contact_section(site_settings: Optional[SiteConfigRecord]) -> None:
    """Render the 'Get In Touch' section with form and details."""
    st.header("Get In Touch")
    st.markdown("Have questions about youth houses or want to get involved? "
                "We'd love to hear from you and help you connect with the Brussels youth community.")

    if 'contact_status' not in st.session_state:
        st.session_state.contact_status = SubmitStatus.IDLE

    details_col, form_col = st.columns(2)

    with details_col:
        render_contact_details(site_settings)

    with form_col:
        with st.form("contact_form", clear_on_submit=True):
            name = st.text_input("Name")
            email = st.text_input("Email")
            message = st.text_area("Message")
            submitted = st.form_submit_button("Send Message")

        if submitted:
            st.session_state.contact_status = submit_contact_form(
                {"name": name, "email": email, "message": message}
            )

        status = st.session_state.contact_status
        if status is SubmitStatus.SUCCESS:
            st.success("Thank you! Your message has been sent successfully.")
        elif status is SubmitStatus.ERROR:
            st.error("Sorry, there was an error sending your message. Please check the form and try again.")


def build_contact_view(site_settings: Optional[SiteConfigRecord]) -> PageView:
    return PageView(metadata=contact_metadata(),
                    render=lambda: render_contact_section(site_settings))
