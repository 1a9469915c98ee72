from dataclasses import dataclass
from app.core.config import Settings


def generate_confirmation_link(config: Settings, trip_id: str) -> str:
    """
    Returns the API URL the owner follows to confirm the trip
    """
    return f"{config.API_BASE_URL.rstrip('/')}/trips/{trip_id}/confirm"


@dataclass
class ConfirmationEmail:
    subject: str
    html: str


def render_confirmation_email(
    destination: str,
    formatted_start_date: str,
    formatted_end_date: str,
    confirmation_link: str,
) -> ConfirmationEmail:
    subject = f"Confirme a sua viagem para {destination} em {formatted_start_date}"

    html = f"""
    <div style="font-family: sans-serif; font-size: 16px; line-height: 1.6;">
      <p>Você solicitou a criação de uma viagem para <strong>{destination}</strong> nas datas <strong>{formatted_start_date}</strong> até <strong>{formatted_end_date}</strong>.</p>
      <p></p>
      <p>Para confirmar sua viagem, clique no link abaixo:</p>
      <p></p>
      <a href="{confirmation_link}">Confirmar viagem</a>
      <p></p>
      <p>Caso esteja usando o dispositivo móvel, você também pode confirmar a criação da viagem pelos aplicativos:</p>
      <p></p>
      <a href="">Aplicativo para Iphone</a>
      <a href="">Aplicativo para Android</a>
      <p></p>
      <p>Caso você não saiba do que se trata esse e-mail, apenas ignore este e-mail.</p>
    </div>
    """.strip()

    return ConfirmationEmail(subject=subject, html=html)
