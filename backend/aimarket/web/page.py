"""
Storefront Page

Renders the single HTML page: module cards, PayPal checkout button,
demo activation and brief form.
"""
import json
from html import escape
from pathlib import Path
from typing import List

from ..models.modules import Module

STATIC_DIR = Path(__file__).parent / "static"
STYLESHEET_PATH = STATIC_DIR / "styles.css"

PLACEHOLDER_CLIENT_ID = "YOUR_PAYPAL_CLIENT_ID"


_CARD_TEMPLATE = """
          <article class="card" data-id="{id}" data-price="{price}">
            <div>
              <div class="tags">{tags}</div>
              <h3>{name}</h3>
              <p>{description}</p>
              <ul class="meta">
                <li><span>Livrable</span> {deliverable}</li>
                <li><span>Délai</span> {eta}</li>
              </ul>
            </div>
            <div class="card-footer">
              <span class="price">{price} €</span>
              <button class="select" type="button">Sélectionner</button>
            </div>
          </article>"""


_PAGE_TEMPLATE = """<!doctype html>
<html lang="fr">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>AI Market</title>
    <link rel="stylesheet" href="/assets/styles.css" />
  </head>
  <body>
    <header class="hero">
      <div>
        <p class="pill">Marché privé</p>
        <h1>AI Market pour agents intelligents</h1>
        <p class="subtitle">Une vitrine minimaliste pour vendre des services IA entre agents, avec paiement PayPal sécurisé.</p>
      </div>
      <div class="hero-card">
        <h2>Accès instantané</h2>
        <p>Choisissez un module IA, validez le paiement et recevez un jeton d'activation.</p>
        <div class="hero-metric">
          <span>Mode</span>
          <strong>{mode_label}</strong>
        </div>
      </div>
    </header>

    <main>
      <section class="grid">{cards}
      </section>

      <section class="checkout">
        <div>
          <h2>Checkout sécurisé</h2>
          <p>Sélectionnez un module IA pour activer le paiement.</p>
          <div class="selected">
            <strong id="selected-name">Aucun module sélectionné</strong>
            <span id="selected-price">—</span>
          </div>
          <button id="demo-activation" class="secondary" type="button">Activation démo</button>
          <pre id="activation-result" class="result" hidden></pre>
        </div>
        <div id="paypal-button-container" class="paypal"></div>
      </section>

      <section class="brief">
        <h2>Brief</h2>
        <form id="brief-form">
          <label>Contexte <textarea name="context" rows="3"></textarea></label>
          <label>Objectifs <textarea name="goals" rows="2"></textarea></label>
          <label>Sources (une par ligne) <textarea name="sources" rows="2"></textarea></label>
          <button type="submit">Envoyer le brief</button>
        </form>
        <pre id="brief-result" class="result" hidden></pre>
      </section>
    </main>

    <footer>
      <p>AI Market est un marché interne destiné aux agents IA et à l'opérateur.</p>
    </footer>

    <script>
      const items = {items_json};
      let selectedItem = null;

      const nameEl = document.getElementById('selected-name');
      const priceEl = document.getElementById('selected-price');

      const postJson = async (url, payload) => {{
        const response = await fetch(url, {{
          method: 'POST',
          headers: {{ 'Content-Type': 'application/json' }},
          body: JSON.stringify(payload || {{}})
        }});
        return response.json();
      }};

      const show = (id, data) => {{
        const el = document.getElementById(id);
        el.textContent = JSON.stringify(data, null, 2);
        el.hidden = false;
      }};

      document.querySelectorAll('.select').forEach((button) => {{
        button.addEventListener('click', (event) => {{
          const card = event.target.closest('.card');
          selectedItem = items.find((item) => item.id === card.dataset.id);
          nameEl.textContent = selectedItem.name;
          priceEl.textContent = selectedItem.price + ' €';
          document.querySelectorAll('.card').forEach((node) => node.classList.remove('active'));
          card.classList.add('active');
        }});
      }});

      document.getElementById('demo-activation').addEventListener('click', async () => {{
        if (!selectedItem) {{
          alert('Sélectionnez un module IA.');
          return;
        }}
        show('activation-result', await postJson('/api/demo-activation', {{ moduleId: selectedItem.id }}));
      }});

      document.getElementById('brief-form').addEventListener('submit', async (event) => {{
        event.preventDefault();
        if (!selectedItem) {{
          alert('Sélectionnez un module IA.');
          return;
        }}
        const form = new FormData(event.target);
        show('brief-result', await postJson('/api/briefs', {{
          module: selectedItem.id,
          moduleName: selectedItem.name,
          outputs: selectedItem.outputs,
          context: form.get('context'),
          goals: form.get('goals'),
          sources: String(form.get('sources') || '').split('\\n').filter(Boolean)
        }}));
      }});
    </script>
    <script src="https://www.paypal.com/sdk/js?client-id={client_id}&currency=EUR"></script>
    <script>
      paypal.Buttons({{
        createOrder: async () => {{
          if (!selectedItem) {{
            alert('Sélectionnez un module IA avant de payer.');
            throw new Error('No item selected');
          }}
          const order = await postJson('/api/orders', {{
            itemId: selectedItem.id,
            itemName: selectedItem.name,
            amount: selectedItem.price
          }});
          return order.id;
        }},
        onApprove: async (data) => {{
          const details = await postJson('/api/orders/' + data.orderID + '/capture');
          alert('Paiement confirmé pour ' + (details.payer?.name?.given_name || 'client') + ' !');
          if (details.activation) {{
            show('activation-result', details.activation);
          }}
        }}
      }}).render('#paypal-button-container');
    </script>
  </body>
</html>"""


def render_card(module: Module) -> str:
    return _CARD_TEMPLATE.format(
        id=escape(module.id),
        price=escape(module.price),
        name=escape(module.name),
        description=escape(module.description),
        deliverable=escape(module.deliverable),
        eta=escape(module.eta),
        tags="".join(f'<span class="tag">{escape(tag)}</span>' for tag in module.tags),
    )


def render_storefront(catalog: List[Module], client_id: str, live: bool) -> str:
    """
    Render the storefront HTML.

    Args:
        catalog: Modules to list, in display order
        client_id: PayPal client id for the SDK script (placeholder when unset)
        live: Whether PayPal credentials are configured
    """
    # `</` cannot appear inside an inline <script>
    items_json = json.dumps(
        [module.model_dump(mode="json") for module in catalog],
        ensure_ascii=False,
    ).replace("</", "<\\/")

    return _PAGE_TEMPLATE.format(
        mode_label="PayPal" if live else "Démo",
        cards="".join(render_card(module) for module in catalog),
        items_json=items_json,
        client_id=escape(client_id or PLACEHOLDER_CLIENT_ID),
    )
