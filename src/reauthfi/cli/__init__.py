# SPDX-FileCopyrightText: 2026 The reauthfi Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
