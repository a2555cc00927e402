"""
camps/share.py
──────────────
Public share links for camps and their QR codes.
"""

import base64
import io

import qrcode
from django.conf import settings


def camp_share_url(camp):
    return f"{settings.SITE_URL.rstrip('/')}/camp/slug/{camp.slug}"


def generate_share_qr(url: str, box_size: int = 7):
    """
    Build a QR code for *url* and return it as a base64-encoded PNG string
    for use in <img src="data:image/png;base64,..."> tags.
    """
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size,
        border=4,
    )
    qr.add_data(url)
    qr.make(fit=True)

    img = qr.make_image(fill_color="#1a1a2e", back_color="white")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return base64.b64encode(buf.getvalue()).decode("utf-8")
