"""
Static browser client served at GET /. Posts {"symptoms": ...} to /check and renders
red flags, possible conditions and disclaimers. Any non-2xx response shows a generic error.
"""

INDEX_HTML = """<!doctype html>
<html>
<head>
  <meta charset="utf-8" />
  <title>Healthcare Symptom Checker — Demo</title>
  <meta name="viewport" content="width=device-width,initial-scale=1" />
  <style>
    body { font-family: system-ui, -apple-system, "Segoe UI", Roboto, Arial; max-width:800px; margin:24px auto; padding:16px; line-height:1.5; }
    header { margin-bottom:12px; }
    textarea { width:100%; min-height:120px; font-size:14px; padding:8px; }
    button { padding:10px 14px; font-size:16px; border-radius:8px; cursor:pointer; }
    .card { border-radius:12px; padding:12px; margin-top:12px; box-shadow: 0 1px 6px rgba(0,0,0,0.08); }
    .alert { border-left:6px solid #c0392b; }
    .red { color:#7b0710; font-weight:700; }
    .muted { color:#555; font-size:13px; }
    ul { margin:8px 0 12px 18px; }
    .footer { margin-top:18px; font-size:13px; color:#444; }
  </style>
</head>
<body>
  <header>
    <h1>Healthcare Symptom Checker — Demo</h1>
    <div class="muted">Type your symptoms (e.g., "fever and body aches", "runny nose and sore throat") and click Check. This demo is intentionally limited.</div>
  </header>
  <form id="symptomForm" class="card" onsubmit="return false;">
    <label for="symptoms"><strong>Describe your symptoms</strong></label>
    <textarea id="symptoms" placeholder="e.g., sore throat, runny nose, slight fever..."></textarea>
    <div style="margin-top:10px;">
      <button id="checkBtn" onclick="checkSymptoms()">Check symptoms</button>
    </div>
    <div id="result" style="margin-top:12px;"></div>
  </form>
  <section class="footer">
    <strong>Important:</strong> This tool is a demo and not a substitute for professional medical advice. If you have severe symptoms, call emergency services.
  </section>
  <script>
    function escapeHtml(s) {
      return String(s).replace(/[&<>"']/g, m => ({'&':'&amp;','<':'&lt;','>':'&gt;','"':'&quot;',"'":'&#39;'}[m]));
    }
    function listItems(items, render) {
      return '<ul>' + items.map(render).join('') + '</ul>';
    }
    async function checkSymptoms() {
      const symptoms = document.getElementById('symptoms').value.trim();
      const resultDiv = document.getElementById('result');
      if (!symptoms) {
        resultDiv.innerHTML = '<div class="card red">Please enter your symptoms.</div>';
        return;
      }
      resultDiv.innerHTML = '<em>Checking...</em>';
      try {
        const resp = await fetch('/check', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify({ symptoms })
        });
        if (!resp.ok) throw new Error('Server error: ' + resp.status);
        const data = await resp.json();
        let html = '';
        if (data.redFlags && data.redFlags.length) {
          html += '<div class="card alert"><strong class="red">Emergency alert</strong>';
          html += listItems(data.redFlags, m => '<li>' + escapeHtml(m) + '</li>');
          html += '</div>';
        }
        html += '<div class="card"><strong>Possible conditions (limited demo)</strong>';
        html += listItems(data.possibleConditions, c =>
          '<li><strong>' + escapeHtml(c.name) + '</strong>' +
          '<div class="muted">' + escapeHtml(c.explanation) + '</div>' +
          '<div style="margin-top:6px;"><em>Advice:</em> ' + escapeHtml(c.advice) + '</div></li>');
        html += '</div>';
        html += '<div class="card muted"><strong>Disclaimers</strong>';
        html += listItems(data.disclaimers, d => '<li>' + escapeHtml(d) + '</li>');
        html += '</div>';
        resultDiv.innerHTML = html;
      } catch (err) {
        resultDiv.innerHTML = '<div class="card red">An error occurred while checking symptoms. Try again.</div>';
      }
    }
  </script>
</body>
</html>
"""
