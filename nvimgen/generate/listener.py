# nvimgen Listener Script
# Lua HTTP listener that runs inside Neovim and receives pushed configuration files

from nvimgen.generate.lua import lua_string

DEFAULT_LISTENER_PORT = 45831

_LISTENER_TEMPLATE = r"""-- Neovim HTTP listener for pushed config updates
-- Accepts GET /ping and POST /save (JSON {filename, content} or multipart "file")
local function setup_config_listener()
  local uv = vim.loop
  local port = __PORT__
  local auth_token = __TOKEN__
  local config_dir = vim.fn.stdpath("config")

  local function respond(client, status, body)
    local headers = {
      ["Content-Type"] = "application/json",
      ["Content-Length"] = tostring(#body),
      ["Access-Control-Allow-Origin"] = "*",
      ["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS",
      ["Access-Control-Allow-Headers"] = "Content-Type, Authorization",
      ["Connection"] = "close",
    }
    local head = "HTTP/1.1 " .. status .. "\r\n"
    for key, value in pairs(headers) do
      head = head .. key .. ": " .. value .. "\r\n"
    end
    client:write(head .. "\r\n" .. body)
    client:close()
  end

  local function parse_headers(block)
    local headers = {}
    for line in block:gmatch("[^\r\n]+") do
      local key, value = line:match("([^:]+):%s*(.+)")
      if key and value then
        headers[key:lower()] = value
      end
    end
    return headers
  end

  local function parse_multipart(body, boundary)
    local parts = {}
    local marker = "--" .. boundary
    local positions = {}
    local pos = 1
    while true do
      local found = body:find(marker, pos, true)
      if not found then
        break
      end
      table.insert(positions, found)
      pos = found + 1
    end
    for i = 1, #positions - 1 do
      local section = body:sub(positions[i] + #marker, positions[i + 1] - 1)
      if section:sub(1, 2) == "\r\n" then
        section = section:sub(3)
      end
      local split = section:find("\r\n\r\n", 1, true)
      if split then
        local head = section:sub(1, split - 1)
        local content = section:sub(split + 4)
        if content:sub(-2) == "\r\n" then
          content = content:sub(1, -3)
        end
        local name = head:match('name="([^"]*)"')
        if name then
          parts[name] = { filename = head:match('filename="([^"]*)"'), content = content }
        end
      end
    end
    return parts
  end

  local function read_upload(headers, body)
    local content_type = headers["content-type"] or ""
    if content_type:find("application/json", 1, true) then
      local ok, data = pcall(vim.json.decode, body)
      if not ok or type(data) ~= "table" then
        return nil, "Invalid JSON body"
      end
      if type(data.filename) ~= "string" then
        return nil, "Missing filename"
      end
      return data.filename, data.content
    end
    local boundary = content_type:match("boundary=([^;%s]+)")
    if not boundary then
      return nil, "Missing multipart boundary"
    end
    local part = parse_multipart(body, boundary)["file"]
    if not part then
      return nil, "Missing file in multipart data"
    end
    if type(part.filename) ~= "string" then
      return nil, "Missing filename"
    end
    return part.filename, part.content
  end

  local function save(filename, content)
    if type(filename) ~= "string" or filename == "" or filename:find("[/\\]") or filename:find("..", 1, true) then
      return "400 Bad Request", vim.json.encode({ error = "Invalid file name" })
    end
    if type(content) ~= "string" or content == "" then
      return "400 Bad Request", vim.json.encode({ error = "Missing or empty file content" })
    end
    local file_path = config_dir .. "/" .. filename
    local file = io.open(file_path, "w")
    if not file then
      return "500 Internal Server Error", vim.json.encode({ error = "Failed to write file" })
    end
    file:write(content)
    file:close()
    if filename == "init.lua" then
      vim.schedule(function()
        vim.notify("Config updated from nvimgen", vim.log.levels.INFO)
        vim.cmd("source " .. vim.fn.fnameescape(file_path))
      end)
    end
    return "200 OK", vim.json.encode({ success = true, message = "File saved successfully", path = file_path })
  end

  local server = uv.new_tcp()
  server:bind("127.0.0.1", port)
  server:listen(128, function(err)
    if err then
      vim.schedule(function()
        vim.notify("Failed to start config listener: " .. err, vim.log.levels.ERROR)
      end)
      return
    end

    local client = uv.new_tcp()
    server:accept(client)

    local buffer = ""
    client:read_start(function(read_err, chunk)
      if read_err then
        client:close()
        return
      end
      if not chunk then
        return
      end
      buffer = buffer .. chunk

      local header_end = buffer:find("\r\n\r\n", 1, true)
      if not header_end then
        return
      end
      local method, path = (buffer:match("^(.-)\r\n") or ""):match("(%S+)%s+(%S+)")
      local first_crlf = buffer:find("\r\n", 1, true)
      local headers = parse_headers(buffer:sub(first_crlf + 2, header_end - 1))
      local content_length = tonumber(headers["content-length"] or "0") or 0
      local body_start = header_end + 4
      if #buffer - body_start + 1 < content_length then
        return
      end
      client:read_stop()
      local body = buffer:sub(body_start, body_start + content_length - 1)

      if method == "OPTIONS" then
        respond(client, "204 No Content", "")
        return
      end
      if auth_token and headers["authorization"] ~= "Bearer " .. auth_token then
        respond(client, "401 Unauthorized", vim.json.encode({ error = "Invalid or missing token" }))
        return
      end

      if method == "GET" and path == "/ping" then
        respond(client, "200 OK", vim.json.encode({ status = "ok", message = "Neovim listener active" }))
      elseif method == "POST" and path == "/save" then
        local filename, content = read_upload(headers, body)
        if filename == nil then
          respond(client, "400 Bad Request", vim.json.encode({ error = content }))
          return
        end
        local status, payload = save(filename, content)
        respond(client, status, payload)
      else
        respond(client, "404 Not Found", vim.json.encode({ error = "Not found" }))
      end
    end)
  end)

  vim.notify("Config listener started on port " .. port, vim.log.levels.INFO)
  _G.nvimgen_listener_server = server
end

setup_config_listener()
"""


def generate_listener_lua(port: int = DEFAULT_LISTENER_PORT, token: str | None = None) -> str:
    """
    Render the companion listener script.

    Args:
        port: TCP port bound on 127.0.0.1.
        token: Bearer token required on every request, or None for no auth.

    Returns:
        Lua source to place in the Neovim config.

    Raises:
        ValueError: If the port is outside 1-65535.
    """
    if not 0 < int(port) < 65536:
        raise ValueError(f"Port must be between 1 and 65535, got {port}")
    token_literal = lua_string(token) if token else "nil"
    return _LISTENER_TEMPLATE.replace("__PORT__", str(int(port))).replace("__TOKEN__", token_literal)
