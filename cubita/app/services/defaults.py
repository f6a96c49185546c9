# cubita/app/services/defaults.py
"""
Built-in copy used whenever the CMS is unreachable or leaves a field empty.
"""
from __future__ import annotations

from cubita.app.domain.models import (
    AboutPage,
    ArtistsPage,
    ContactPage,
    FormLabels,
    HomePage,
    LocalizedText,
    NavLabels,
    Service,
    SiteSettings,
    Stats,
)

AVAILABILITY_PLACEHOLDER = "Por confirmar / TBC / À confirmer"

COMPANY_NAME = "Cubita Producciones"
COMPANY_EMAIL = "info@cubitaproducciones.com"
COMPANY_PHONE = "+39 XXX XXX XXXX"
COMPANY_LOCATION = "Roma, Italia"

DEFAULT_HOME_PAGE = HomePage(
    hero_title=LocalizedText(
        es="Booking de Artistas Cubanos",
        en="Cuban Artists Booking",
        fr="Réservation d'Artistes Cubains",
        it="Prenotazione Artisti Cubani",
    ),
    hero_subtitle=LocalizedText(
        es="Conectamos el talento cubano con el mundo",
        en="Connecting Cuban talent with the world",
        fr="Connecter le talent cubain avec le monde",
        it="Colleghiamo il talento cubano con il mondo",
    ),
    stats=Stats(years=30, artists=50, festivals=100, countries=15),
    about_title=LocalizedText(es="Sobre Nosotros", en="About Us", fr="À Propos", it="Chi Siamo"),
    about_text=LocalizedText(
        es="Somos una agencia de booking especializada en artistas cubanos.",
        en="We are a booking agency specialized in Cuban artists.",
        fr="Nous sommes une agence de booking spécialisée dans les artistes cubains.",
        it="Siamo un'agenzia di booking specializzata in artisti cubani.",
    ),
    cta_text=LocalizedText(es="Ver Artistas", en="View Artists", fr="Voir les Artistes", it="Vedi Artisti"),
    seo=None,
)

DEFAULT_ABOUT_PAGE = AboutPage(
    title=LocalizedText(es="Sobre Nosotros", en="About Us", fr="À Propos", it="Chi Siamo"),
    subtitle=LocalizedText(
        es="Más de 30 años de experiencia",
        en="Over 30 years of experience",
        fr="Plus de 30 ans d'expérience",
        it="Oltre 30 anni di esperienza",
    ),
    mission_title=LocalizedText(
        es="Nuestra Misión", en="Our Mission", fr="Notre Mission", it="La Nostra Missione"
    ),
    mission_text=LocalizedText(
        es="Conectar el talento cubano con escenarios de todo el mundo.",
        en="Connecting Cuban talent with stages around the world.",
        fr="Connecter le talent cubain avec les scènes du monde entier.",
        it="Collegare il talento cubano con i palcoscenici di tutto il mondo.",
    ),
    stats=Stats(years=30, artists=50, festivals=100, countries=15),
    services=(
        Service(
            title=LocalizedText(es="Booking", en="Booking", fr="Réservation", it="Prenotazione"),
            text=LocalizedText(
                es="Gestión completa de contrataciones",
                en="Complete booking management",
                fr="Gestion complète des réservations",
                it="Gestione completa delle prenotazioni",
            ),
        ),
        Service(
            title=LocalizedText(es="Producción", en="Production", fr="Production", it="Produzione"),
            text=LocalizedText(
                es="Producción de eventos y conciertos",
                en="Event and concert production",
                fr="Production d'événements et concerts",
                it="Produzione di eventi e concerti",
            ),
        ),
        Service(
            title=LocalizedText(es="Tours", en="Tours", fr="Tournées", it="Tour"),
            text=LocalizedText(
                es="Organización de giras internacionales",
                en="International tour organization",
                fr="Organisation de tournées internationales",
                it="Organizzazione di tour internazionali",
            ),
        ),
    ),
    seo=None,
)

DEFAULT_CONTACT_PAGE = ContactPage(
    title=LocalizedText(es="Contacto", en="Contact", fr="Contact", it="Contatto"),
    subtitle=LocalizedText(
        es="Estamos aquí para ayudarte",
        en="We are here to help you",
        fr="Nous sommes là pour vous aider",
        it="Siamo qui per aiutarti",
    ),
    email=COMPANY_EMAIL,
    phone=COMPANY_PHONE,
    location=COMPANY_LOCATION,
    response_time_title=LocalizedText(
        es="Respuesta Rápida", en="Quick Response", fr="Réponse Rapide", it="Risposta Rapida"
    ),
    response_time_text=LocalizedText(
        es="Respondemos en menos de 24 horas",
        en="We respond within 24 hours",
        fr="Nous répondons sous 24 heures",
        it="Rispondiamo entro 24 ore",
    ),
    form_labels=FormLabels(
        name=LocalizedText(es="Nombre", en="Name", fr="Nom", it="Nome"),
        email=LocalizedText.uniform("Email"),
        country=LocalizedText(es="País", en="Country", fr="Pays", it="Paese"),
        date=LocalizedText(
            es="Fecha del evento", en="Event date", fr="Date de l'événement", it="Data evento"
        ),
        artist=LocalizedText(
            es="Artista de interés",
            en="Artist of interest",
            fr="Artiste d'intérêt",
            it="Artista di interesse",
        ),
        message=LocalizedText(es="Mensaje", en="Message", fr="Message", it="Messaggio"),
        submit=LocalizedText(
            es="Enviar mensaje", en="Send message", fr="Envoyer le message", it="Invia messaggio"
        ),
    ),
    success_message=LocalizedText(
        es="Mensaje enviado correctamente",
        en="Message sent successfully",
        fr="Message envoyé avec succès",
        it="Messaggio inviato con successo",
    ),
    error_message=LocalizedText(
        es="Error al enviar el mensaje",
        en="Error sending message",
        fr="Erreur lors de l'envoi du message",
        it="Errore nell'invio del messaggio",
    ),
    seo=None,
)

DEFAULT_ARTISTS_PAGE = ArtistsPage(
    title=LocalizedText(
        es="Nuestros Artistas", en="Our Artists", fr="Nos Artistes", it="I Nostri Artisti"
    ),
    subtitle=LocalizedText(
        es="Descubre el talento cubano",
        en="Discover Cuban talent",
        fr="Découvrez le talent cubain",
        it="Scopri il talento cubano",
    ),
    view_details_button=LocalizedText(
        es="Ver Detalles", en="View Details", fr="Voir Détails", it="Vedi Dettagli"
    ),
    cta_title=LocalizedText(
        es="¿Interesado en booking?",
        en="Interested in booking?",
        fr="Intéressé par une réservation?",
        it="Interessato a prenotare?",
    ),
    cta_subtitle=LocalizedText(
        es="Contacta con nosotros para más información",
        en="Contact us for more information",
        fr="Contactez-nous pour plus d'informations",
        it="Contattaci per maggiori informazioni",
    ),
    salsa_label=LocalizedText.uniform("Salsa"),
    reggaeton_label=LocalizedText(es="Reguetón", en="Reggaeton", fr="Reggaeton", it="Reggaeton"),
    seo=None,
)

DEFAULT_SITE_SETTINGS = SiteSettings(
    company_name=COMPANY_NAME,
    logo=None,
    email=COMPANY_EMAIL,
    phone=COMPANY_PHONE,
    location=COMPANY_LOCATION,
    nav=NavLabels(
        home=LocalizedText(es="Inicio", en="Home", fr="Accueil", it="Home"),
        artists=LocalizedText(es="Artistas", en="Artists", fr="Artistes", it="Artisti"),
        about=LocalizedText(es="Sobre Nosotros", en="About Us", fr="À Propos", it="Chi Siamo"),
        contact=LocalizedText(es="Contacto", en="Contact", fr="Contact", it="Contatto"),
    ),
    footer_description=LocalizedText(
        es="Agencia de booking de artistas cubanos",
        en="Cuban artists booking agency",
        fr="Agence de réservation d'artistes cubains",
        it="Agenzia di booking di artisti cubani",
    ),
    footer_copyright=LocalizedText(
        es="Todos los derechos reservados",
        en="All rights reserved",
        fr="Tous droits réservés",
        it="Tutti i diritti riservati",
    ),
)
