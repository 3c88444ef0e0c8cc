"""
Site footer with contact details and social links.
"""

import html
from datetime import date
from typing import Optional

import streamlit as st

from components.cms.models import SiteConfigRecord
from utils.icons import get_icon

SOCIAL_NETWORKS = ('instagram', 'facebook', 'twitter')


def social_links_html(site_settings: Optional[SiteConfigRecord]) -> str:
    """Icon links for the social accounts configured in the CMS."""
    if site_settings is None:
        return ""
    links = []
    for network in SOCIAL_NETWORKS:
        url = site_settings.social_media.get(network)
        if not url or not url.lower().startswith(("http://", "https://")):
            continue
        links.append(
            f'<a href="{html.escape(url, quote=True)}" target="_blank" rel="noopener noreferrer" '
            f'title="{network.capitalize()}" style="margin: 0 6px; color: #6b7280;">'
            f'<i class="bi bi-{get_icon(network)}" style="font-size: 18px;"></i></a>'
        )
    return "".join(links)


def render_footer(site_settings: Optional[SiteConfigRecord]) -> None:
    title = "Entree Brussels"
    contact = []
    if site_settings is not None:
        title = site_settings.site_title or title
        if site_settings.contact_email:
            contact.append(html.escape(site_settings.contact_email))
        if site_settings.contact_phone:
            contact.append(html.escape(site_settings.contact_phone))

    st.divider()
    st.markdown(f"""
    <div style="text-align: center; color: #6b7280; font-size: 14px; padding: 1rem 0;">
        <div style="margin-bottom: 0.5rem;">{social_links_html(site_settings)}</div>
        <div>{' · '.join(contact)}</div>
        <div>© {date.today().year} {html.escape(title)}. Connecting Brussels youth communities.</div>
    </div>
    """, unsafe_allow_html=True)
