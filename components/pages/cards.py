"""
HTML card fragments for projects.
"""

import html
from typing import Optional

from components.cms.models import ProjectRecord, SelectOption

STATUS_COLORS = {
    'active': '#16a34a',
    'completed': '#2563eb',
    'planned': '#d97706',
}
DEFAULT_BADGE_COLOR = '#6b7280'
CARD_IMAGE_SIZE = (600, 400)


def _badge(option: Optional[SelectOption], colors: dict = None) -> str:
    if option is None or not option.value:
        return ""
    color = (colors or {}).get(option.key.lower(), DEFAULT_BADGE_COLOR)
    return (f'<span style="background: {color}; color: white; border-radius: 9999px; '
            f'padding: 2px 10px; font-size: 12px; margin-right: 6px;">{html.escape(option.value)}</span>')


def project_card_html(project: ProjectRecord) -> str:
    """Card markup for a project: image, badges, title and short description."""
    image = ""
    if project.featured_image is not None:
        src = project.featured_image.sized(*CARD_IMAGE_SIZE)
        image = (f'<img src="{html.escape(src, quote=True)}" alt="{html.escape(project.title, quote=True)}" '
                 f'style="width: 100%; height: 180px; object-fit: cover; border-radius: 8px 8px 0 0;">')

    badges = _badge(project.status, STATUS_COLORS) + _badge(project.category)

    dates = ""
    if project.start_date:
        period = html.escape(project.start_date)
        if project.end_date:
            period += f" – {html.escape(project.end_date)}"
        dates = f'<p style="font-size: 12px; color: #6b7280; margin: 8px 0 0 0;">{period}</p>'

    houses = ""
    if project.youth_houses_involved:
        names = ", ".join(html.escape(h.display_name) for h in project.youth_houses_involved)
        houses = f'<p style="font-size: 12px; color: #6b7280; margin: 8px 0 0 0;">With {names}</p>'

    return f"""
    <div style="border: 1px solid #e5e7eb; border-radius: 8px; margin-bottom: 1rem; overflow: hidden;">
        {image}
        <div style="padding: 12px 16px;">
            <div style="margin-bottom: 8px;">{badges}</div>
            <h4 style="margin: 0 0 8px 0;">{html.escape(project.title)}</h4>
            <p style="margin: 0; color: #374151;">{html.escape(project.short_description)}</p>
            {dates}
            {houses}
        </div>
    </div>
    """
