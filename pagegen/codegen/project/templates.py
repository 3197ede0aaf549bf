"""Project file sources: verbatim static files and Jinja2 templates for the IR-driven ones."""

from __future__ import annotations

import json
from typing import Any, Dict

from jinja2 import DictLoader, Environment, StrictUndefined

# Files copied verbatim; their braces are TSX/SCSS syntax, not template tags.
STATIC_FILES: Dict[str, str] = {
    "react/vite-env.d.ts": """/// <reference types="vite/client" />

declare module "*.module.scss" {
  const classes: { [key: string]: string };
  export default classes;
}

declare module "*.module.css" {
  const classes: { [key: string]: string };
  export default classes;
}
""",
    "common/.gitignore": """# Logs
logs
*.log
npm-debug.log*
yarn-debug.log*
pnpm-debug.log*

node_modules
dist
dist-ssr
*.local

# Editor directories and files
.vscode/*
!.vscode/extensions.json
.idea
.DS_Store
""",
    "react/global.scss": """*,
*::before,
*::after {
  box-sizing: border-box;
}

html,
body,
#root {
  margin: 0;
  padding: 0;
  min-height: 100%;
}

body {
  font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif;
  -webkit-font-smoothing: antialiased;
}

.pagegen-app {
  min-height: 100vh;
}

.page-wrapper {
  padding: 16px;
}
""",
    "react/components/Page.tsx": """import React from "react";

interface PageProps {
  children?: React.ReactNode;
  style?: React.CSSProperties;
  className?: string;
}

const Page: React.FC<PageProps> = ({ children, style, className }) => {
  return (
    <div className={["page-wrapper", className].filter(Boolean).join(" ")} style={style}>
      {children}
    </div>
  );
};

export default Page;
""",
    "react/components/PageHeader.tsx": """import React from "react";
import { Space, Typography } from "antd";

const { Title, Text } = Typography;

interface PageHeaderProps {
  title?: string;
  subTitle?: string;
  style?: React.CSSProperties;
  className?: string;
}

const PageHeader: React.FC<PageHeaderProps> = ({ title, subTitle, style, className }) => {
  const combinedStyle: React.CSSProperties = {
    border: "1px solid #f0f0f0",
    padding: "16px 24px",
    ...style,
  };

  return (
    <div style={combinedStyle} className={className}>
      <Space direction="vertical">
        <Title level={3} style={{ margin: 0 }}>
          {title}
        </Title>
        <Text type="secondary">{subTitle}</Text>
      </Space>
    </div>
  );
};

export default PageHeader;
""",
    "react/components/index.ts": """export { default as Page } from "./Page";
export { default as PageHeader } from "./PageHeader";
""",
    "react/App.tsx": """import React from "react";
import AppRouter from "./router";
import "./global.scss";

const App: React.FC = () => {
  return (
    <div className="pagegen-app">
      <AppRouter />
    </div>
  );
};

export default App;
""",
    "react/main.tsx": """import React from "react";
import ReactDOM from "react-dom/client";
import App from "./App";

const container = document.getElementById("root");

if (container) {
  ReactDOM.createRoot(container).render(
    <React.StrictMode>
      <App />
    </React.StrictMode>
  );
} else {
  console.error('No element with id "root" to mount the app into.');
}
""",
    "vue/main.ts": """import { createApp } from "vue";
import App from "./App.vue";

createApp(App).mount("#app");
""",
}

TEMPLATES: Dict[str, str] = {
    # ------------------------------------------------------------------
    # React + Vite
    # ------------------------------------------------------------------
    "react/index.html": """<!doctype html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <link rel="icon" type="image/svg+xml" href="/vite.svg" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{{ title | e }}</title>
  </head>
  <body>
    <div id="root"></div>
    <script type="module" src="/src/main.tsx"></script>
  </body>
</html>
""",
    "react/vite.config.ts": """import { defineConfig } from "vite";
import react from "@vitejs/plugin-react";

// https://vitejs.dev/config/
export default defineConfig({
  plugins: [react()],
  resolve: {
    alias: {
      "@": "/src",
    },
  },
  server: {
    port: {{ port }},
    open: true,
  },
  build: {
    outDir: "dist",
  },
});
""",
    "react/router.tsx": """import React from "react";
import { createBrowserRouter, RouterProvider } from "react-router-dom";
{% for route in routes %}
import {{ route.component }} from "../pages/{{ route.component }}/{{ route.component }}";
{%- endfor %}

const router = createBrowserRouter([
{%- for route in routes %}
  {
    path: {{ route.path_literal }},
    element: <{{ route.component }} />,
  },
{%- endfor %}
]);

const AppRouter: React.FC = () => {
  return <RouterProvider router={router} />;
};

export default AppRouter;
""",
    # ------------------------------------------------------------------
    # Vue + Vite skeleton
    # ------------------------------------------------------------------
    "vue/index.html": """<!doctype html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{{ title | e }}</title>
  </head>
  <body>
    <div id="app"></div>
    <script type="module" src="/src/main.ts"></script>
  </body>
</html>
""",
    "vue/App.vue": """<script setup lang="ts">
</script>

<template>
  <div id="app">
    <h1 v-pre>{{ title | e }}</h1>
    <p>Generated by pagegen.</p>
  </div>
</template>

<style scoped>
#app {
  font-family: Avenir, Helvetica, Arial, sans-serif;
  text-align: center;
  margin-top: 60px;
}
</style>
""",
}

_environment = Environment(
    loader=DictLoader(TEMPLATES),
    autoescape=False,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)


def render_template(name: str, **context: Any) -> str:
    """Render template ``name`` with ``context``."""
    return _environment.get_template(name).render(**context)


def static_file(name: str) -> str:
    """Return the verbatim content of static file ``name``."""
    return STATIC_FILES[name]


def dump_json(data: Any) -> str:
    """Manifest JSON: two-space indent, trailing newline."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


__all__ = ["STATIC_FILES", "TEMPLATES", "dump_json", "render_template", "static_file"]
