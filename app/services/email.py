import os
import logging
import asyncio
from datetime import datetime, timezone
from jinja2 import Environment, FileSystemLoader, select_autoescape
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail, To

from app.core.config import settings
from app.utils.events import event_bus

logger = logging.getLogger(__name__)

EMAIL_SEND_REQUESTED = "email_send_requested"

async def handle_email_send_requested(data):
    if not settings.EMAILS_ENABLED:
        logger.info(f"Email delivery disabled; dropping '{data['subject']}' for {data['to_email']}")
        return
    try:
        await EmailService._send_email_via_sendgrid(
            data["to_email"],
            data["subject"],
            data["template_name"],
            data["template_context"]
        )
    except Exception as e:
        logger.error(f"Failed to send email to {data['to_email']}: {e}")

event_bus.subscribe(EMAIL_SEND_REQUESTED, handle_email_send_requested)

class EmailService:
    _template_env = None

    @classmethod
    def _get_template_env(cls):
        if cls._template_env is None:
            template_dir = os.path.join(
                os.path.dirname(os.path.abspath(__file__)),
                '..',
                'templates'
            )

            cls._template_env = Environment(
                loader=FileSystemLoader(template_dir),
                autoescape=select_autoescape(['html']),
                enable_async=False
            )
        return cls._template_env

    @classmethod
    def render_template(cls, template_name: str, context: dict) -> str:
        """
        Render an email template

        :param template_name: Name of the template file
        :param context: Dictionary of template variables
        :return: Rendered HTML template
        """
        try:
            default_context = {
                'company_name': settings.EMAILS_FROM_NAME,
                'frontend_base_url': settings.FRONTEND_BASE_URL,
                'current_year': datetime.now().year,
                **context
            }

            template = cls._get_template_env().get_template(template_name)
            return template.render(**default_context)
        except Exception as e:
            logger.error(f"Error rendering email template {template_name}: {e}")
            raise

    @classmethod
    async def send_email(
        cls,
        to_email: str,
        subject: str,
        template_name: str,
        template_context: dict,
    ):
        await event_bus.publish(EMAIL_SEND_REQUESTED, {
            "to_email": to_email,
            "subject": subject,
            "template_name": template_name,
            "template_context": template_context,
            "timestamp": datetime.now(timezone.utc).isoformat()
        })

    @classmethod
    async def _send_email_via_sendgrid(
        cls,
        to_email: str,
        subject: str,
        template_name: str,
        template_context: dict,
    ):
        html_content = cls.render_template(template_name, template_context)

        message = Mail(
            from_email=f"{settings.EMAILS_FROM_NAME} <{settings.EMAILS_FROM_EMAIL}>",
            to_emails=To(to_email),
            subject=subject,
            html_content=html_content
        )

        sendgrid_client = SendGridAPIClient(settings.SENDGRID_API_KEY)
        # the SendGrid client is blocking
        response = await asyncio.to_thread(sendgrid_client.send, message)

        if response.status_code not in [200, 201, 202]:
            raise RuntimeError(f"SendGrid API error: {response.status_code}")

        logger.info(f"Email sent successfully to {to_email} via SendGrid")
