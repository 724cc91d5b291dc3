import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from threadit_config.settings import Settings

logger = logging.getLogger(__name__)

PASSWORD_RESET_SUBJECT = "Reset your Threadit password"

PASSWORD_RESET_TEXT = """Hello,

Someone asked to reset the password of your Threadit account.

Open the link below to choose a new password (valid for {valid_days} days):
{reset_link}

If you didn't ask for this, ignore this email. Your password stays the same.

-- Threadit
"""

PASSWORD_RESET_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: sans-serif; margin: 0; padding: 20px;">
    <p>Someone asked to reset the password of your Threadit account.</p>
    <p>This link is valid for {valid_days} days:</p>
    <p><a href="{reset_link}">reset password</a></p>
    <p style="color: #6b7280; font-size: 13px;">If you didn't ask for this, ignore this email.</p>
</body>
</html>
"""


class EmailService:
    """Sends transactional email over SMTP.

    Sending blocks; async callers run it in a worker thread.
    """

    def __init__(self, settings: Settings):
        self._settings = settings

    def _create_message(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: str | None = None,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f"{self._settings.smtp_from_name} <{self._settings.smtp_from_email}>"
        msg["To"] = to_email

        msg.attach(MIMEText(text_body, "plain"))
        if html_body:
            msg.attach(MIMEText(html_body, "html"))

        return msg

    def _send_email(self, to_email: str, message: MIMEMultipart) -> bool:
        if not self._settings.smtp_host:
            logger.error("SMTP host not configured, email to %s dropped", to_email)
            return False

        smtp_password = (
            self._settings.smtp_password.get_secret_value()
            if self._settings.smtp_password
            else ""
        )

        if self._settings.smtp_use_tls and not self._settings.smtp_starttls:
            # Implicit TLS (port 465)
            context = ssl.create_default_context()
            with smtplib.SMTP_SSL(
                self._settings.smtp_host,
                self._settings.smtp_port,
                context=context,
            ) as server:
                if self._settings.smtp_user:
                    server.login(self._settings.smtp_user, smtp_password)
                server.send_message(message)
        else:
            with smtplib.SMTP(
                self._settings.smtp_host,
                self._settings.smtp_port,
            ) as server:
                if self._settings.smtp_starttls:
                    server.starttls(context=ssl.create_default_context())
                if self._settings.smtp_user:
                    server.login(self._settings.smtp_user, smtp_password)
                server.send_message(message)

        logger.info("Email sent to %s", to_email)
        return True

    def send_password_reset_email(self, to_email: str, reset_link: str) -> bool:
        """Send the reset link to ``to_email``.

        Returns
        -------
        True if the message was handed to the SMTP server, False if sending
        is disabled or no SMTP host is configured
        """
        if not self._settings.smtp_enabled:
            # The link holds a live token; never log it
            logger.warning("SMTP disabled, skipping password reset email to %s", to_email)
            return False

        valid_days = self._settings.reset_token_ttl_days
        message = self._create_message(
            to_email=to_email,
            subject=PASSWORD_RESET_SUBJECT,
            text_body=PASSWORD_RESET_TEXT.format(
                reset_link=reset_link,
                valid_days=valid_days,
            ),
            html_body=PASSWORD_RESET_HTML.format(
                reset_link=reset_link,
                valid_days=valid_days,
            ),
        )

        return self._send_email(to_email, message)
