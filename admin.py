import os
from datetime import date, time

import pandas as pd
import requests
import streamlit as st
from dotenv import load_dotenv

from barbershop.core.config_loader import load_shop_config
from barbershop.models.booking import Booking, BookingStatus
from barbershop.services.link_service import build_reminder

load_dotenv()

API_URL = os.getenv("BOOKING_API_URL", "http://localhost:5000").rstrip("/")
TIMEOUT = 10

# Page Config
st.set_page_config(
    page_title="Manual Barbearia",
    page_icon="💈",
    layout="wide"
)

EMPTY_CATALOG = {"shopName": None, "currency": "R$", "services": [], "barbers": []}

def load_catalog():
    try:
        response = requests.get(f"{API_URL}/api/catalog", timeout=TIMEOUT)
        response.raise_for_status()
        return response.json()
    except (requests.RequestException, ValueError):
        pass

    # API down: read the same catalogue file the backend serves
    try:
        config = load_shop_config()
    except (FileNotFoundError, ValueError):
        st.error("Erro ao carregar serviços e barbeiros")
        return dict(EMPTY_CATALOG)
    return {
        "shopName": config.get("shop_name"),
        "currency": config.get("currency", "R$"),
        "services": config.get("services", []),
        "barbers": config.get("barbers", []),
    }

def load_bookings():
    """Whole list, newest first. Any failure shows as an empty list."""
    try:
        response = requests.get(f"{API_URL}/api/bookings", timeout=TIMEOUT)
        response.raise_for_status()
        return [Booking.model_validate(item) for item in response.json()]
    except (requests.RequestException, ValueError):
        return []

def update_status(booking_id: str, status: BookingStatus):
    try:
        response = requests.patch(
            f"{API_URL}/api/bookings/{booking_id}",
            json={"status": status.value},
            timeout=TIMEOUT,
        )
        response.raise_for_status()
    except requests.RequestException:
        st.error("Erro ao atualizar agendamento")
        return
    # Refetch everything on the next run
    st.rerun()

catalog = load_catalog()
shop_name = catalog.get("shopName") or "Manual Barbearia"

# Header
st.title(shop_name)

col_form, col_list = st.columns(2)

with col_form:
    st.subheader("Agende seu horário")

    services = catalog.get("services") or []
    barbers = catalog.get("barbers") or []
    currency = catalog.get("currency", "R$")

    if not services or not barbers:
        st.warning("Agendamento indisponível no momento.")

    with st.form("booking_form", clear_on_submit=True):
        service = st.selectbox(
            "Serviço",
            services,
            format_func=lambda s: f"{s['name']} — {currency} {s['price']}",
        )
        barber = st.selectbox("Barbeiro", barbers, format_func=lambda b: b["name"])
        c1, c2 = st.columns(2)
        booking_date = c1.date_input("Data", value=date.today())
        booking_time = c2.time_input("Hora", value=time(10, 0))
        client_name = st.text_input("Nome")
        client_phone = st.text_input("Telefone (WhatsApp)", placeholder="559XXXXXXXXX")
        submitted = st.form_submit_button("Confirmar agendamento", disabled=not (services and barbers))

    if submitted and service and barber:
        payload = {
            "serviceName": service["name"],
            "barberName": barber["name"],
            "date": booking_date.strftime("%Y-%m-%d"),
            "time": booking_time.strftime("%H:%M"),
            "clientName": client_name,
            "clientPhone": client_phone,
        }
        try:
            response = requests.post(f"{API_URL}/api/bookings", json=payload, timeout=TIMEOUT)
            response.raise_for_status()
            data = response.json()
            st.success("Agendamento realizado!")
            if data.get("waLink"):
                st.link_button("Avisar a barbearia no WhatsApp", data["waLink"])
        except (requests.RequestException, ValueError):
            st.error("Erro ao criar agendamento")

with col_list:
    st.subheader("Agendamentos")

    if st.button("Atualizar"):
        st.rerun()

    bookings = load_bookings()

    if not bookings:
        st.info("Nenhum agendamento.")

    for b in bookings:
        with st.container(border=True):
            info, actions = st.columns([3, 2])
            info.markdown(f"**{b.service_name} — {b.barber_name}**")
            info.markdown(f"### {b.client_name} — {b.client_phone}")
            info.write(f"{b.date} às {b.time}")
            info.caption(f"Status: {b.status.value} · ID: {b.id}")

            actions.link_button("Lembrar cliente", build_reminder(b, shop_name))
            if actions.button("Atendido", key=f"attended-{b.id}"):
                update_status(b.id, BookingStatus.ATTENDED)
            if actions.button("Cancelar", key=f"cancel-{b.id}"):
                update_status(b.id, BookingStatus.CANCELLED)

if bookings:
    st.markdown("---")
    df = pd.DataFrame([b.model_dump(mode="json") for b in bookings])
    df["created_at"] = pd.to_datetime(df["created_at"])

    col1, col2, col3 = st.columns(3)
    col1.metric("Total de agendamentos", len(df))
    col2.metric("Confirmados", int((df["status"] == BookingStatus.CONFIRMED.value).sum()))
    col3.metric("Atendidos", int((df["status"] == BookingStatus.ATTENDED.value).sum()))

    st.dataframe(
        df,
        use_container_width=True,
        column_config={
            "created_at": st.column_config.DatetimeColumn("Criado em", format="D.M.YYYY HH:mm"),
            "service_name": "Serviço",
            "barber_name": "Barbeiro",
            "date": "Data",
            "time": "Hora",
            "client_name": "Cliente",
            "client_phone": "Telefone",
            "status": "Status",
            "id": "ID"
        }
    )

# Footer
st.markdown("---")
st.caption(f"Preto & Amarelo • {shop_name}")
